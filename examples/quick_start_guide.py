#!/usr/bin/env python3
"""
Quick Start Guide for RSS Channel.

This example walks through building a feed, rendering it, handling
validation errors and embedding pre-formatted content.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rss_channel import (
    ChannelBuilder,
    ChannelConfig,
    FeedValidationError,
    cdata,
    channel,
    channel_xml,
)

FEED = {
    "title": "Engineering Notes",
    "link": "https://example.com/notes",
    "description": "Short posts about tools & techniques",
    "language": "en-us",
    "lastBuildDate": datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
}


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - RSS Channel")
    print("=" * 45)

    # Step 1: Build the document tree
    print("\n📄 Step 1: Building a Channel")
    print("-" * 30)

    document = channel(
        FEED,
        {
            "title": "Profiling with cProfile",
            "link": "https://example.com/notes/cprofile",
            "category": [{"domain": "https://example.com/tags"}, "python"],
            "pubDate": datetime(2024, 2, 28, 17, 0, tzinfo=timezone.utc),
        },
        [
            {"title": "Reading flame graphs", "category": ["perf", "tooling"]},
            {"description": cdata("<p>A post with <em>inline</em> markup.</p>")},
        ],
    )

    print(f"✅ Created document with {document.total_elements} elements")
    print(f"📰 Items: {len(document.items)}")

    # Step 2: Render to markup
    print("\n🖨️  Step 2: Serializing")
    print("-" * 30)
    print(document.to_xml())


def validation_example():
    """Show how validation failures surface."""

    print("\n🔍 Validation")
    print("-" * 30)

    try:
        channel({"title": "No link or description"})
    except FeedValidationError as e:
        print(f"  ❌ {type(e).__name__}: {e}")

    try:
        channel(FEED, {"title": "ok", "rating": "PG"})
    except FeedValidationError as e:
        print(f"  ❌ {type(e).__name__}: {e}")

    permissive = ChannelBuilder(ChannelConfig.permissive())
    print(f"  ✅ Permissive: {permissive.build_xml({'title': 'Anything', 'mood': 'fine'})}")


def main():
    """Main function."""
    quick_start_example()
    validation_example()
    print(f"\n✅ Empty placeholder: {channel_xml()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
