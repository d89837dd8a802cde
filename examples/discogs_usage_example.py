"""
Example usage of the discogs-sdk client.

This example demonstrates how to:
1. Search the database for releases
2. Get master release details and walk its versions page by page
3. Get specific release details
4. Read the authenticated user's collection value and want list
5. Validate an inventory CSV file before uploading it

Before running:
1. Set your Discogs personal access token in an environment variable:
   export DISCOGS_TOKEN="your_token_here"
   OR
2. Create a config.yaml with your credentials:
   discogs:
     user_agent: "MyApp/1.0 +https://example.com"
     auth:
       method: token
       token: your_token_here

Run with:
    python examples/discogs_usage_example.py
"""

import asyncio
from pathlib import Path

import discogs_sdk
from discogs_sdk import Discogs, DiscogsError, ThrottledError
from discogs_sdk.common.logging_config import bind_context, clear_context
from discogs_sdk.csv import InventoryCsvValidator, InventoryRecordType
from discogs_sdk.models.collection import GetCollectionValueRequest
from discogs_sdk.models.database import (
    GetMasterReleaseRequest,
    GetMasterReleaseVersionsRequest,
    GetReleaseRequest,
    SearchRequest,
)
from discogs_sdk.models.types import SearchType
from discogs_sdk.models.wantlist import GetWantListRequest


async def search_releases(discogs: Discogs, artist: str, track: str) -> None:
    """Search for master releases by artist and track."""
    print(f"\n{'='*60}")
    print(f"Searching for: {artist} - {track}")
    print(f"{'='*60}")

    results = await discogs.database.search(
        SearchRequest(artist=artist, track=track, type=SearchType.MASTER, per_page=5)
    )
    print(f"Found {results.pagination.items} results")
    for result in results.results:
        print(f"  [{result.id}] {result.title} ({result.year or 'n/a'})")


async def show_master_versions(discogs: Discogs, master_id: int) -> None:
    """Print a master release and every one of its versions."""
    master = await discogs.database.get_master_release(
        GetMasterReleaseRequest(master_id=master_id)
    )
    print(f"\nMaster {master.id}: {master.title} ({master.year})")
    print(f"  Main release: {master.main_release}")

    first = await discogs.database.get_master_release_versions(
        GetMasterReleaseVersionsRequest(master_id=master_id, per_page=25)
    )
    async for page in first.iter_pages():
        print(f"  Page {page.pagination.page}/{page.pagination.pages}")
        for version in page.versions:
            print(f"    [{version.id}] {version.format} - {version.country} {version.released}")


async def show_release(discogs: Discogs, release_id: int) -> None:
    """Print details of a single release."""
    release = await discogs.database.get_release(GetReleaseRequest(release_id=release_id))
    print(f"\nRelease {release.id}: {release.title}")
    print(f"  Released: {release.released or 'unknown'}")
    print(f"  Labels: {', '.join(label.name for label in release.labels if label.name)}")
    for track in release.tracklist:
        print(f"    {track.position:>4} {track.title} {track.duration or ''}")


async def show_user_summary(discogs: Discogs) -> None:
    """Print the collection value and the first page of the want list."""
    identity = await discogs.user_identity.get_identity()
    print(f"\nLogged in as {identity.username}")
    # Tag the SDK events below with the user they were made for
    bind_context(username=identity.username)
    try:
        value = await discogs.user_collection.get_collection_value(
            GetCollectionValueRequest(username=identity.username)
        )
        print(f"  Collection value: {value.minimum} - {value.maximum} (median {value.median})")

        wants = await discogs.user_want_list.get_want_list(
            GetWantListRequest(username=identity.username, per_page=10)
        )
        print(f"  Want list: {wants.pagination.items} releases")
    finally:
        clear_context()


def validate_inventory(csv_file: Path) -> None:
    """Check an inventory CSV file before sending it to the upload endpoints."""
    if not csv_file.exists():
        return

    errors = InventoryCsvValidator(InventoryRecordType.NEW, max_errors=20).validate(csv_file)
    if not errors:
        print(f"\n{csv_file} is ready to upload")
        return

    print(f"\n{csv_file} has {len(errors)} problem(s):")
    for error in errors:
        print(f"  row {error.row}: {error.message}")


async def main() -> None:
    config_path = Path(__file__).parent.parent / "config.yaml"
    config = discogs_sdk.configure(config_path=config_path if config_path.exists() else None)

    try:
        async with Discogs.from_config(config.discogs) as discogs:
            await search_releases(discogs, "Rick Astley", "Never Gonna Give You Up")
            await show_master_versions(discogs, 96559)
            await show_release(discogs, 249504)

            if discogs.is_authenticated:
                await show_user_summary(discogs)
            else:
                print("\nSet DISCOGS_TOKEN to see your collection and want list")
    except ThrottledError as e:
        print(f"\nRate limited ({e.rate_limit_remaining}/{e.rate_limit} requests left)")
    except DiscogsError as e:
        print(f"\nDiscogs request failed: {e}")

    validate_inventory(Path("inventory.csv"))


if __name__ == "__main__":
    asyncio.run(main())
