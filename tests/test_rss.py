import threading
import xml.etree.ElementTree as ET
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from gator.rss import RSSFeed, RSSItem, fetch_feed, parse_feed

SAMPLE = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Tom &amp;amp; Jerry</title>
    <link>https://example.com/</link>
    <description>Cats &amp;amp; mice</description>
    <item>
      <title>First &amp;lt;post&amp;gt;</title>
      <link>https://example.com/1?a=1&amp;b=2</link>
      <description>One</description>
      <pubDate>Mon, 01 Jan 2024 00:00:00 +0000</pubDate>
    </item>
    <item>
      <title>Second</title>
      <link>https://example.com/2</link>
    </item>
  </channel>
</rss>
"""


def test_parse_sample_feed():
    feed = parse_feed(SAMPLE)
    assert feed.title == "Tom & Jerry"
    assert feed.link == "https://example.com/"
    assert feed.description == "Cats & mice"
    assert feed.items == [
        RSSItem(
            title="First <post>",
            link="https://example.com/1?a=1&b=2",
            description="One",
            pub_date="Mon, 01 Jan 2024 00:00:00 +0000",
        ),
        RSSItem(title="Second", link="https://example.com/2"),
    ]


def test_cdata_is_read():
    doc = "<rss><channel><item><description><![CDATA[<p>hi</p>]]></description></item></channel></rss>"
    assert parse_feed(doc).items[0].description == "<p>hi</p>"


def test_namespaced_link_matches_by_local_name_last_wins():
    doc = (
        '<rss xmlns:atom="http://www.w3.org/2005/Atom"><channel>'
        "<link>https://example.com/</link>"
        '<atom:link href="https://example.com/feed" rel="self"/>'
        "</channel></rss>"
    )
    assert parse_feed(doc).link == ""


def test_missing_channel_gives_empty_feed():
    assert parse_feed("<rss></rss>") == RSSFeed()


def test_malformed_xml_raises():
    with pytest.raises(ET.ParseError):
        parse_feed(b"<rss><channel>")
    with pytest.raises(ET.ParseError):
        parse_feed(b"")


class _FeedServer(BaseHTTPRequestHandler):
    seen_agents: list = []
    status = 200

    def do_GET(self):
        type(self).seen_agents.append(self.headers.get("User-Agent"))
        self.send_response(type(self).status)
        self.send_header("Content-Type", "application/rss+xml")
        self.send_header("Content-Length", str(len(SAMPLE)))
        self.end_headers()
        self.wfile.write(SAMPLE)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    _FeedServer.seen_agents = []
    _FeedServer.status = 200
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _FeedServer)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}/index.xml"
    httpd.shutdown()
    httpd.server_close()


def test_fetch_feed_sends_user_agent(server):
    feed = fetch_feed(server, timeout=5)
    assert feed == parse_feed(SAMPLE)
    assert _FeedServer.seen_agents == ["gator"]


def test_fetch_feed_parses_body_of_error_response(server):
    _FeedServer.status = 404
    feed = fetch_feed(server, timeout=5)
    assert feed.title == "Tom & Jerry"
    assert len(feed.items) == 2