"""
Interactive REPL for muniwiki lookups.
"""

import logging
import os
import sys

from muniwiki import (
    FeatureDataError,
    GeoJSONFileSource,
    InvalidQueryError,
    LookupConfig,
    MunicipalityLookup,
    MuniWikiError,
)


def print_search_result(lookup, result):
    """Pretty print a search result."""
    print()
    print("=" * 60)
    print("RESULT")
    print("=" * 60)

    print(f"\n📍 Title: {result.title}")
    print(f"   Matched: {result.matched_name} ({result.match_type})")
    if result.bounds:
        b = result.bounds
        print(f"\n📐 Bounds: lat {b.min_lat:.4f}..{b.max_lat:.4f}, lon {b.min_lon:.4f}..{b.max_lon:.4f}")
    print(f"🎨 Color: {lookup.color_for_feature(result.feature)}")

    others = len(lookup.index.lookup(result.matched_name)) - 1
    if others:
        print(f"   ({others} more feature(s) share this name)")

    print(f"\n🔗 {result.url}")
    print()


def print_click_result(result):
    """Pretty print a reverse geocoding result."""
    print()
    if result.resolved:
        print(f"📍 候補: {result.title}")
    else:
        print("❌ 市区町村が特定できませんでした")
    print(f"🔗 {result.url}")
    print()


def main():
    """Run the interactive REPL."""
    logging.basicConfig(level=os.environ.get("MUNIWIKI_LOG_LEVEL", "WARNING").upper())

    try:
        config = LookupConfig.from_env()
    except MuniWikiError as e:
        print(f"❌ Invalid configuration: {e}")
        return

    data_path = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("MUNIWIKI_GEOJSON")

    print("🔄 Initializing muniwiki...")
    if data_path:
        try:
            lookup = MunicipalityLookup.from_source(GeoJSONFileSource(data_path), config=config)
        except FeatureDataError as e:
            print(f"❌ Failed to load features: {e}")
            return
        print(f"✅ Indexed {len(lookup.index)} names from {lookup.index.feature_count} features")
    else:
        lookup = MunicipalityLookup(config=config)
        print("⚠️  No boundary file given (argument or MUNIWIKI_GEOJSON); search is disabled")

    print()
    print("=" * 60)
    print("muniwiki Interactive REPL")
    print("=" * 60)
    print("Type a place name to search, or 'help' for commands.")
    print()

    while True:
        try:
            line = input("🔍 Query: ").strip()

            if not line:
                continue

            command, _, rest = line.partition(" ")
            command = command.lower()

            if command in ("quit", "exit"):
                print("👋 Goodbye!")
                break

            if command == "help":
                print()
                print("Available commands:")
                print("  <name>          - Search boundaries (e.g. '札幌', '渋谷区')")
                print("  at <lat> <lon>  - Reverse geocode a point")
                print("  open <name>     - Article URL for a name as typed")
                print("  bounds          - Bounds of the whole dataset")
                print("  help            - Show this help message")
                print("  quit            - Exit the REPL")
                print()
                continue

            if command == "at":
                parts = rest.replace(",", " ").split()
                if len(parts) != 2:
                    print("Usage: at <lat> <lon>")
                    continue
                try:
                    lat, lon = float(parts[0]), float(parts[1])
                except ValueError:
                    print("Usage: at <lat> <lon>")
                    continue
                print("⏳ Geocoding...")
                print_click_result(lookup.at_point(lat, lon))
                continue

            if command == "open":
                url = lookup.url_for_name(rest)
                print(url if url else "Usage: open <name>")
                continue

            if command == "bounds":
                bounds = lookup.bounds
                print(bounds.to_leaflet() if bounds else "(no data)")
                continue

            result = lookup.search(line)
            if result is None:
                print(f"\n❌ No municipality matches '{line}'\n")
            else:
                print_search_result(lookup, result)

        except InvalidQueryError:
            print("Please enter a name.")
        except KeyboardInterrupt:
            print("\n👋 Interrupted. Goodbye!")
            break
        except Exception as e:
            print(f"\n❌ Error: {e}")
            print()


if __name__ == "__main__":
    main()
