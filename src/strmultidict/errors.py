__all__ = ("MultiDictError", "KeyNotFoundError")


class MultiDictError(Exception):
    pass


class KeyNotFoundError(MultiDictError, KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return "No matching key found"
