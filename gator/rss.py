"""Downloading and parsing RSS feeds."""

from __future__ import annotations

import html
import urllib.error
import urllib.request
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

USER_AGENT = "gator"
DEFAULT_TIMEOUT = 10.0


@dataclass
class RSSItem:
    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: str = ""


@dataclass
class RSSFeed:
    title: str = ""
    link: str = ""
    description: str = ""
    items: list[RSSItem] = field(default_factory=list)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _chardata(elem: ET.Element) -> str:
    """The element's own character data, without that of nested elements."""
    parts = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(parts)


def _fields(elem: ET.Element, wanted: set[str]) -> dict[str, str]:
    found: dict[str, str] = {}
    for child in elem:
        name = _local(child.tag)
        if name in wanted:
            found[name] = _chardata(child)
    return found


def parse_feed(data: bytes | str) -> RSSFeed:
    """Parse an RSS document, unescaping HTML entities in titles and descriptions."""
    root = ET.fromstring(data)
    feed = RSSFeed()
    channels = [c for c in root if _local(c.tag) == "channel"]
    if not channels:
        return feed
    channel = channels[-1]

    values = _fields(channel, {"title", "link", "description"})
    feed.title = html.unescape(values.get("title", ""))
    feed.link = values.get("link", "")
    feed.description = html.unescape(values.get("description", ""))

    for elem in channel:
        if _local(elem.tag) != "item":
            continue
        item = _fields(elem, {"title", "link", "description", "pubDate"})
        feed.items.append(
            RSSItem(
                title=html.unescape(item.get("title", "")),
                link=item.get("link", ""),
                description=html.unescape(item.get("description", "")),
                pub_date=item.get("pubDate", ""),
            )
        )
    return feed


def fetch_feed(feed_url: str, timeout: float = DEFAULT_TIMEOUT) -> RSSFeed:
    """Download the feed at ``feed_url`` and parse it, whatever the status code."""
    request = urllib.request.Request(feed_url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as err:
        with err:
            body = err.read()
    return parse_feed(body)