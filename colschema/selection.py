"""
Column selection — merge default, include, exclude, and explicit column
lists into the ordered set of columns to materialize.

Precedence:
1. An explicit column list replaces everything else.
2. Otherwise start from the dataset's default columns,
3. add included columns, keeping only names the dataset knows,
4. then drop excluded columns.

The single-element list ["all"] expands to every column of the dataset,
in registry order, when given as the explicit or include list.
"""

import logging
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

ALL_COLUMNS = "all"


def _is_all_marker(names: Sequence[str]) -> bool:
    return len(names) == 1 and names[0] == ALL_COLUMNS


def _check_names(option: str, names) -> None:
    if isinstance(names, str):
        raise TypeError(
            f"{option} must be a list of column names, not a string ({names!r})"
        )


def compute_used_columns(
    all_columns: Iterable[str],
    default_columns: Iterable[str],
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    columns: Optional[Sequence[str]] = None,
) -> list[str]:
    """Return the ordered, duplicate-free list of columns to output.

    Args:
        all_columns: Every column the dataset defines, in registry order.
        default_columns: The dataset's default subset, in order.
        include: Names to add to the defaults. Names unknown to this
            dataset are dropped silently (they may belong to another one).
        exclude: Names to remove. Names not selected are ignored.
        columns: Explicit list that overrides defaults, include and
            exclude. Returned verbatim; unknown names are kept so that
            type lookup can reject them.

    Empty include and exclude lists behave as if they were not given; an
    empty explicit list selects no columns.

    Raises TypeError if include, exclude or columns is a bare string.
    """
    _check_names("include", include)
    _check_names("exclude", exclude)
    _check_names("columns", columns)

    # dicts double as insertion-ordered sets throughout
    if columns is not None:
        if _is_all_marker(columns):
            logger.debug("Explicit 'all': selecting every column")
            return list(dict.fromkeys(all_columns))
        logger.debug("Explicit column list: %s", list(columns))
        return list(dict.fromkeys(columns))

    selected = dict.fromkeys(default_columns)

    if include:
        if _is_all_marker(include):
            logger.debug("Included 'all': selecting every column")
            return list(dict.fromkeys(all_columns))
        selected.update(dict.fromkeys(include))
        known = set(all_columns)
        dropped = [name for name in selected if name not in known]
        if dropped:
            logger.debug("Skipping columns not in this dataset: %s", dropped)
        selected = {name: None for name in selected if name in known}

    if exclude:
        for name in exclude:
            selected.pop(name, None)

    return list(selected)
