from chromepdf.constants import DEFAULT_FLAGS


def as_list(flag_or_flags):
    if isinstance(flag_or_flags, str):
        return [flag_or_flags]
    return list(flag_or_flags)


class ChromeFlags:
    """Ordered list of command-line switches handed to the browser."""

    def __init__(self, flags=DEFAULT_FLAGS):
        self._flags = as_list(flags)

    def add(self, flag_or_flags) -> None:
        self._flags.extend(as_list(flag_or_flags))

    def replace(self, flags) -> None:
        self._flags = as_list(flags)

    def remove(self, flag_or_flags) -> None:
        # First exact match only, so duplicates added on purpose survive.
        for flag in as_list(flag_or_flags):
            try:
                self._flags.remove(flag)
            except ValueError:
                continue

    def as_tuple(self) -> tuple:
        return tuple(self._flags)

    def __iter__(self):
        return iter(tuple(self._flags))

    def __len__(self):
        return len(self._flags)

    def __contains__(self, flag):
        return flag in self._flags

    def __repr__(self):
        return f"ChromeFlags({self._flags!r})"


__all__ = ["ChromeFlags", "as_list"]
