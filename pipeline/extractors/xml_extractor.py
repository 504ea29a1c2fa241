"""
XML extraction for the country, genre and TV series fixtures.

Both extractors are pure functions from decoded text to in-memory data.
Any deviation from the expected structure raises ParseError; there is no
best-effort extraction.

Expected input:

    <countries><country>USA</country>...</countries>
    <genres><genre>Drama</genre>...</genres>
    <tvseries>
      <tvs name="..." locname="..." year="2020">
        <info amount="3" status="..."/>
        <genres><genre>Drama</genre>...</genres>
        <countries><country>USA</country>...</countries>
      </tvs>
      ...
    </tvseries>
"""

from typing import List, Optional
import logging
import re

from lxml import etree
from pydantic import ValidationError as SchemaError

from core.collation import CollationContext
from core.exceptions import ParseError
from schemas.series import Series

logger = logging.getLogger(__name__)

TEXT_SOURCE = "<text>"

INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_root(text: str, root_tag: str, source: str) -> etree._Element:
    """Parse decoded text and check the root element"""
    # The text is already decoded; the parser encoding overrides any
    # encoding declared in the prolog.
    parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)

    try:
        root = etree.fromstring(text.encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(
            f"error parse file: {source}",
            context={"file_path": source},
            original_exception=e
        )

    if root is None or root.tag != root_tag:
        raise ParseError(
            f"error parse file: {source} (expected root <{root_tag}>)",
            context={"file_path": source, "element": root_tag}
        )
    return root


def _child_texts(parent: etree._Element, tag: str) -> List[str]:
    return [child.text or "" for child in parent.iterchildren(tag=tag)]


def _required_attribute(element: etree._Element, name: str, source: str, index: int) -> str:
    value = element.get(name)
    if value is None:
        raise ParseError(
            f"error parse file: {source} (missing attribute '{name}' on <{element.tag}>)",
            context={"file_path": source, "element_index": index, "element": f"{element.tag}/@{name}"}
        )
    return value


def _int_attribute(element: etree._Element, name: str, source: str, index: int) -> int:
    value = _required_attribute(element, name, source, index)
    if not INTEGER.fullmatch(value.strip()):
        raise ParseError(
            f"error parse file: {source} (attribute '{name}' is not an integer: {value!r})",
            context={"file_path": source, "element_index": index, "element": f"{element.tag}/@{name}"},
        )
    return int(value)


def extract_flat_list(
    text: str,
    root_tag: str,
    item_tag: str,
    source: Optional[str] = None
) -> List[str]:
    """
    Collect the text of each ``item_tag`` child of the ``root_tag`` root.

    Args:
        text: Decoded XML document
        root_tag: Expected root element name
        item_tag: Name of the child elements to collect
        source: File path reported in errors

    Returns:
        Item texts in document order (no dedup)
    """
    source = source or TEXT_SOURCE
    root = _parse_root(text, root_tag, source)
    items = _child_texts(root, item_tag)

    logger.debug(f"Extracted {len(items)} <{item_tag}> items from {source}")
    return items


def extract_series(
    text: str,
    context: Optional[CollationContext] = None,
    source: Optional[str] = None
) -> List[Series]:
    """
    Build one Series per ``tvs`` element of the ``tvseries`` root.

    Args:
        text: Decoded XML document
        context: Collation rules for the status comparison
        source: File path reported in errors

    Returns:
        Series in document order
    """
    source = source or TEXT_SOURCE
    context = context or CollationContext()
    root = _parse_root(text, "tvseries", source)

    result = []

    for index, tvs in enumerate(root.iterchildren(tag="tvs")):
        name = _required_attribute(tvs, "name", source, index)
        locname = _required_attribute(tvs, "locname", source, index)
        year = _int_attribute(tvs, "year", source, index)

        info = tvs.find("info")
        if info is None:
            raise ParseError(
                f"error parse file: {source} (<tvs> #{index} has no <info>)",
                context={"file_path": source, "element_index": index, "element": "tvs/info"}
            )

        amount = _int_attribute(info, "amount", source, index)
        airing = context.is_airing(info.get("status"))

        # genres and countries are read from the siblings that follow <info>
        lists = {}
        for tag, item_tag in (("genres", "genre"), ("countries", "country")):
            holder = next(info.itersiblings(tag=tag), None)
            if holder is None:
                raise ParseError(
                    f"error parse file: {source} (<tvs> #{index} has no <{tag}> after <info>)",
                    context={"file_path": source, "element_index": index, "element": f"tvs/{tag}"}
                )
            lists[tag] = _child_texts(holder, item_tag)

        try:
            series = Series(
                name=name,
                localized_name=locname,
                release_year=year,
                season_count=amount,
                airing=airing,
                genres=lists["genres"],
                countries=lists["countries"],
            )
        except SchemaError as e:
            raise ParseError(
                f"error parse file: {source} (invalid <tvs> #{index})",
                context={"file_path": source, "element_index": index},
                original_exception=e
            )

        logger.debug(f"Parsed series #{index}:\n{series.summary()}")
        result.append(series)

    logger.debug(f"Extracted {len(result)} series from {source}")
    return result
