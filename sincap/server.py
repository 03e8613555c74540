"""Server configuration, route listing, file serving paths and request metrics."""

from __future__ import annotations

import os
import random
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

SAMPLE_SIZE = 1028


@dataclass
class ServerConfig:
    """Configuration of an HTTP server."""

    domain: str = ""
    port: int = 0
    frontend_url: str = ""
    backend_url: str = ""
    security_headers: bool = False
    etag: Optional[dict[str, Any]] = None
    cors: Optional[dict[str, Any]] = None
    limiter: Optional[dict[str, Any]] = None

    def host(self) -> str:
        """Return ``domain:port``."""
        return f"{self.domain}:{self.port}"


@dataclass(frozen=True)
class Route:
    """A registered route."""

    path: str
    method: str


def clean_route(path: str) -> str:
    """Remove wildcard segments and a single trailing slash from a route path."""
    cleaned = path.replace("/*", "")
    return cleaned[:-1] if cleaned.endswith("/") else cleaned


def collect_routes(routes: Iterable[tuple[str, str]]) -> list[Route]:
    """Turn ``(method, path)`` pairs into cleaned routes."""
    return [Route(path=clean_route(path), method=method) for method, path in routes]


def validate_file_server_path(path: str) -> str:
    """Return ``path`` or raise ValueError when it holds URL parameters."""
    if any(ch in path for ch in "{}*"):
        raise ValueError("FileServer does not permit URL parameters.")
    return path


@dataclass(frozen=True)
class FileServerConfig:
    """A folder served under a URL path."""

    folder: str
    path: str

    def resolve(self, work_dir: Optional[str] = None) -> str:
        """Return the folder joined to ``work_dir`` (the current directory by default)."""
        base = os.getcwd() if work_dir is None else work_dir
        return os.path.join(base, self.folder)


class _UniformSample:
    def __init__(self, size: int, rng: random.Random) -> None:
        self._size = size
        self._rng = rng
        self._count = 0
        self._values: list[int] = []

    def update(self, value: int) -> None:
        self._count += 1
        if len(self._values) < self._size:
            self._values.append(value)
            return
        slot = self._rng.randrange(self._count)
        if slot < self._size:
            self._values[slot] = value

    def values(self) -> list[int]:
        return list(self._values)


class RequestMetrics:
    """Service-time samples per route and method, and counts per response status."""

    def __init__(self, sample_size: int = SAMPLE_SIZE) -> None:
        self._sample_size = sample_size
        self._rng = random.Random()
        self._histograms: dict[str, _UniformSample] = {}
        self._status_counts: dict[str, int] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _histogram_name(route: str, method: str) -> str:
        return f"api.{route}.{method}"

    def record(self, route: str, method: str, duration_ns: int, status: int) -> None:
        """Record one served request."""
        name = self._histogram_name(route, method)
        with self._lock:
            sample = self._histograms.get(name)
            if sample is None:
                sample = self._histograms[name] = _UniformSample(self._sample_size, self._rng)
            sample.update(duration_ns)
            key = f"responseStatus.{status}"
            self._status_counts[key] = self._status_counts.get(key, 0) + 1

    def histogram(self, route: str, method: str) -> list[int]:
        """Return the sampled durations of a route and method."""
        with self._lock:
            sample = self._histograms.get(self._histogram_name(route, method))
            return sample.values() if sample is not None else []

    def status_count(self, status: int) -> int:
        """Return how many responses had the given status."""
        with self._lock:
            return self._status_counts.get(f"responseStatus.{status}", 0)