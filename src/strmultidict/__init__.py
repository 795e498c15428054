from strmultidict.errors import KeyNotFoundError, MultiDictError
from strmultidict.multi_dict import Entry, MultiDict

__all__ = ("Entry", "MultiDict", "MultiDictError", "KeyNotFoundError")
