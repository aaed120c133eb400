from . import pages, teachers, favorites, themes


__all__ = [
    "pages",
    "teachers",
    "favorites",
    "themes",
]
