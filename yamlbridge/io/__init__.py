from ._backend import Backend, ensure_library_available
