"""JSON helpers for locators.

Encodes locators in their ``{"Url": ..., "File": ...}`` wire form and decodes
flexible JSON shapes, resolving relative entries against a base locator.
"""

from json import dumps as json_dumps
from json import loads as json_loads
from logging import getLogger
from typing import Any, List, Optional, Sequence, Union

from .constants import LIST_KEYS
from .models import Locator
from .pathstyle import PathStyle

logger = getLogger(__name__)


def dumps(value: Union[Locator, Sequence[Locator]], **kwargs: Any) -> str:
    """Encode one locator or a sequence of locators as JSON.

    Args:
        value: A ``Locator`` or a sequence of them.
        **kwargs: Passed through to ``json.dumps``.
    """
    if isinstance(value, Locator):
        return json_dumps(value.to_dict(), **kwargs)
    return json_dumps([loc.to_dict() for loc in value], **kwargs)


def loads(
    text: str, style: Optional[PathStyle] = None
) -> Union[Locator, List[Locator]]:
    """Decode JSON produced by ``dumps``.

    Returns:
        A ``Locator`` for a JSON object, a list of them for a JSON array.
    """
    data = json_loads(text)
    if isinstance(data, list):
        locators = [Locator.from_dict(item, style) for item in data]
        logger.debug("Decoded %d locators", len(locators))
        return locators
    return Locator.from_dict(data, style)


def load_locators(
    data: object,
    base: Optional[Locator] = None,
    style: Optional[PathStyle] = None,
) -> List[Locator]:
    """Build locators from an already-decoded JSON document.

    Items may be wire-form objects or plain strings. Strings are resolved
    against ``base`` when given, so relative paths and URLs are accepted;
    without a base they must be absolute.

    Args:
        data: A list, or a dict holding lists under ``locators``, ``urls``,
            ``paths`` or ``sources``.
        base: Optional locator that relative string entries resolve against.
        style: Path convention for entries built without a base.

    Returns:
        Locators in document order.
    """
    items = _extract_items_from_json(data)
    if not items:
        raise ValueError("No locators found in input")

    if base is not None and style is None:
        style = base.style

    locators: List[Locator] = []
    for item in items:
        if isinstance(item, str):
            loc = base.resolve(item) if base is not None else Locator.new(item, style)
        else:
            loc = Locator.from_dict(item, style)
        locators.append(loc)

    logger.debug(
        "Loaded %d locators (%d remote)",
        len(locators),
        sum(1 for loc in locators if loc.is_remote),
    )
    return locators


def _extract_items_from_json(data: object) -> List[Any]:
    """Extract locator entries from supported JSON shapes.

    Supported shapes:
      - list[str | dict]
      - dict with keys: "locators", "urls", "paths", "sources"
    """
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict):
        items: List[Any] = []
        for key in LIST_KEYS:
            val = data.get(key)
            if isinstance(val, list):
                items.extend(val)
        return items
    raise ValueError(
        "Unsupported JSON format: expected array or object with "
        "locators/urls/paths/sources"
    )
