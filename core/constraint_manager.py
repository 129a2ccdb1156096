from typing import Any, Callable


class ConstraintManager:
    def __init__(self, state: Any):
        self.state = state
        self.rules: list[Callable] = []

    def add_rule(self, rule_func: Callable, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self, *args):
        """Apply all registered rules in order. The first failing rule raises."""
        for rule in self.rules:
            rule(self.state, *args)
