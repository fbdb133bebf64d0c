import json
from typing import Any

from src.codec import decode_entities
from src.errors import MalformedArray
from src.models import VideoSource


def _string_field(record: dict[str, Any], key: str) -> str | None:
    value = record.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def parse_source_list(array_text: str) -> list[VideoSource]:
    """
    Parses the carved video source array into video sources.

    Records without a 'src' or 'label' are skipped, the remaining ones keep
    the order of the array.

    Args:
        array_text: The closed array text taken from the player page.

    Returns:
        The video sources found, possibly empty.

    Raises:
        MalformedArray: If the text is not a JSON list.
    """
    try:
        records = json.loads(array_text)
    except json.JSONDecodeError as e:
        raise MalformedArray(f"Could not parse video source array: {e}", details=array_text) from e

    if not isinstance(records, list):
        raise MalformedArray(f"Expected a list of sources, got {type(records).__name__}", details=array_text)

    sources: list[VideoSource] = []
    for record in records:
        if not isinstance(record, dict):
            continue

        url = _string_field(record, "src")
        quality = _string_field(record, "label")
        if not url or not quality:
            continue

        sources.append(VideoSource(quality=quality, url=decode_entities(url)))
    return sources
