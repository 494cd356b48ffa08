__all__ = (
    "BindingTypeError",
    "ConstructionError",
    "DispatchValidationError",
    "InteropTypeError",
    "InvalidArgumentError",
    "MiddlewareConstructionError",
    "ReentrancyError",
    "ShapeError",
    "StoreError"
)


class StoreError(Exception):
    pass


class InvalidArgumentError(StoreError, TypeError):
    pass


class ConstructionError(InvalidArgumentError):
    pass


class InteropTypeError(InvalidArgumentError):
    pass


class BindingTypeError(InvalidArgumentError):
    pass


class DispatchValidationError(StoreError, ValueError):
    pass


class ReentrancyError(StoreError):
    pass


class ShapeError(StoreError):
    pass


class MiddlewareConstructionError(StoreError):
    pass
