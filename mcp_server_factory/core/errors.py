from __future__ import annotations


class ComponentError(Exception):
    pass


class ParameterValidationError(ComponentError):
    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        if reason:
            super().__init__(f"Invalid parameter '{field}': {reason}")
        else:
            super().__init__(f"Missing required parameter: {field}")


class ComponentNotFoundError(ComponentError):
    def __init__(self, kind: str, target: str) -> None:
        self.kind = kind
        self.target = target
        super().__init__(f"{kind} not found: {target}")


class DelegateNotFoundError(ComponentError):
    def __init__(self, planner: str, delegate: str) -> None:
        super().__init__(f"Planner '{planner}' cannot delegate: '{delegate}' is not registered")


class RegistryFrozenError(ComponentError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Registry is frozen; cannot register '{name}'")
