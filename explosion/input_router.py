"""Input routing.

Transforms raw pygame events into high-level *actions* so the frame loop
never parses events itself.

- Each rule is a function(event) -> action|None, processed in declaration
  order; the first match for an event wins.
- Actions are ``(name, payload)`` tuples. ``("spawn", (x, y))`` carries the
  click position; other actions carry ``None``.
- Duplicate payload-less actions in one frame are collapsed; every click
  is reported, and the frame loop picks which one spawns (app.py uses
  the latest click of the frame).
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Tuple

import pygame

Action = Tuple[str, Any]
Rule = Callable[[pygame.event.Event], Optional[Action]]


def _key_rule(key: int, name: str, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return (name, None)
        return None

    return _r


def _click_rule(button: int, name: str) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == pygame.MOUSEBUTTONDOWN and getattr(e, "button", None) == button:
            x, y = e.pos
            return (name, (float(x), float(y)))
        return None

    return _r


def _quit_rule(e: pygame.event.Event):
    if e.type == pygame.QUIT:
        return ("quit", None)
    return None


class InputRouter:
    """Maps pygame events to semantic actions."""

    def __init__(self) -> None:
        self._rules: List[Rule] = [
            _quit_rule,
            _key_rule(pygame.K_ESCAPE, "quit"),
            _click_rule(1, "spawn"),
            _key_rule(pygame.K_c, "clear"),
        ]

    def register_rules(self, rules: Iterable[Rule], append: bool = True) -> None:
        if append:
            self._rules.extend(rules)
        else:
            self._rules = list(rules)

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            for rule in self._rules:
                a = rule(e)
                if a:
                    if a[1] is not None or a not in actions:
                        actions.append(a)
                    break
        return actions


def spawn_points(actions: Iterable[Action]) -> List[Tuple[float, float]]:
    return [payload for name, payload in actions if name == "spawn"]


__all__ = ["InputRouter", "Action", "Rule", "spawn_points"]
