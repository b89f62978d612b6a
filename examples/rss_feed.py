"""Example: RSS feed

This example builds a small RSS document as plain dictionaries and writes it
with a prolog, attributes, repeated items and a replacer that shortens long
descriptions.
"""

from treexml import ReplaceEvent, stringify


def shorten(event: ReplaceEvent) -> str:
    """Truncate item descriptions to 40 characters."""
    if event.tag == "description" and len(event.value) > 40:
        return event.value[:37] + "..."
    return event.value


feed = {
    "xml": {"@version": "1.0", "@encoding": "UTF-8"},
    "rss": {
        "@version": "2.0",
        "channel": {
            "title": "Release notes",
            "link": "https://example.com/releases",
            "item": [
                {
                    "title": "1.2.0",
                    "description": "Adds doctype element declarations & faster escaping of large documents",
                },
                {
                    "title": "1.1.0",
                    "description": "Bug fixes",
                },
            ],
        },
    },
}


if __name__ == "__main__":
    print(stringify(feed, replacer=shorten))
