"""Cache of repository star counts, refreshed from the GitHub API."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from os import PathLike
from pathlib import Path
from typing import Union

from interspace.model import Component, Repo, StarCache

USER_AGENT = "interspace-regen-data"
MAX_CACHE_AGE = timedelta(days=1)

PathLikeStr = Union[str, "PathLike[str]"]
Fetch = Callable[[str], Union[int, None]]


def fetch_stars(url: str) -> int | None:
    """Ask the GitHub API for the star count of the repository at ``url``."""
    api_url = url.replace("github.com", "api.github.com/repos")
    request = urllib.request.Request(api_url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=30) as response:
            body = response.read()
    except (urllib.error.URLError, OSError, ValueError):
        print(f"failed to update stars from {url}: No response.")
        return None
    try:
        count = json.loads(body)["stargazers_count"]
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(count)
    except (ValueError, KeyError, TypeError):
        print(f"failed to update stars from {url}: Invalid response.")
        return None
    print(f"succesfully updated stars of {url}")
    return count


def update_repo(
    repo: Repo | None, new_repo_base: Repo | None, fetch: Fetch = fetch_stars
) -> Repo | None:
    """The repository that should replace ``repo``: a copy of
    ``new_repo_base`` with freshly fetched stars for GitHub repositories."""
    if new_repo_base is None:
        return None
    stars = fetch(new_repo_base.url) if "github.com" in new_repo_base.url else None
    return dataclasses.replace(new_repo_base, stars=stars)


def load_star_caches(path: PathLikeStr) -> list[StarCache]:
    """Read the star cache; a missing or unreadable file gives an empty cache."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        print(f"COULD NOT READ {path}, CREATING NEW")
        return []
    try:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("star cache must be a list")
        return [StarCache.from_dict(item) for item in data]
    except (ValueError, TypeError):
        print(f"COULD NOT PARSE {path}, REFETCHING ALL STARS")
        return []


def save_star_caches(path: PathLikeStr, caches: Iterable[StarCache]) -> None:
    """Write the star cache as pretty-printed JSON."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        json.dumps([cache.to_dict() for cache in caches], indent=2), encoding="utf-8"
    )


def _repo_changed(cached: Repo | None, source: Repo | None) -> bool:
    if cached is None or source is None:
        return (cached is None) != (source is None)
    return cached.url != source.url


def update_stars_cache(
    path: PathLikeStr,
    components: Iterable[Component] | None = None,
    fetch: Fetch = fetch_stars,
    now: datetime | None = None,
) -> list[StarCache]:
    """Refresh stale or changed entries of the star cache at ``path``, add
    missing ones, write it back and return it."""
    if components is None:
        from interspace.constellation import Constellation

        components = Constellation.generate_skeleton().comps
    if now is None:
        now = datetime.now(timezone.utc)

    caches = load_star_caches(path)
    for comp in components:
        source = comp.info.source
        cache = next((c for c in caches if c.comp_str_id == comp.str_id), None)
        if cache is None:
            caches.append(
                StarCache(
                    update_time=now,
                    comp_id=comp.id,
                    comp_str_id=comp.str_id,
                    repo=update_repo(None, source, fetch),
                )
            )
        elif now - cache.update_time > MAX_CACHE_AGE or _repo_changed(cache.repo, source):
            cache.repo = update_repo(cache.repo, source, fetch)
            cache.update_time = now

    save_star_caches(path, caches)
    return caches