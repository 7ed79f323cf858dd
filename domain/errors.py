class AnimalFarmError(Exception):
    """Base class for application errors."""


class DuplicateRouteError(AnimalFarmError):
    def __init__(self, path: str):
        super().__init__(f"Route already registered: {path!r}")
        self.path = path


class RouteNotFoundError(AnimalFarmError):
    def __init__(self, path: str):
        super().__init__(f"No view registered for {path!r}")
        self.path = path


class ResourceNotFoundError(AnimalFarmError):
    def __init__(self, path: str):
        super().__init__(f"Resource not found: {path}")
        self.path = path
