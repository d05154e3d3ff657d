__all__ = ["tag", "version", "released"]


# When tagging a release, set `released = True`.
# After tagging a release, set `released = False` and increment `tag`.

released = False

tag = version = "0.1"
