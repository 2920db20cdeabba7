"""Backend label for fe_users records shown in the staff directory grids."""

from typing import Any, Mapping, MutableMapping


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def format_label(row: Mapping[str, Any]) -> str:
    """Returns ``"Last, First (Title)"``; empty parts are left out.

    Non-string values (numbers from a raw row) are rendered with ``str``.
    """
    label = _text(row["last_name"]) + ", " if row.get("last_name") else ""
    label += _text(row.get("first_name"))
    if row.get("title"):
        label += " (" + _text(row["title"]) + ")"
    return label


def get_label(params: MutableMapping[str, Any], parent=None) -> None:
    """Grid hook: writes the label of ``params["row"]`` into ``params["title"]``.

    ``params`` is left untouched when it carries no row.
    """
    if not params.get("row"):
        return

    params["title"] = format_label(params["row"])
