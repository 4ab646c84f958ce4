from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import httpx

from src.adapters.aws import s3_client
from src.adapters.config import env_float
from src.app.ports.output import IFacilityRepository
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import Facility, GeoPoint

DEFAULT_FACILITIES_SOURCE = "site/facilities.json"


def _facility_from_record(row: Mapping[str, Any]) -> Facility:
    # facilities.json uses the short keys of the web client (type/alt/pop);
    # the long model names are accepted too.
    name = str(row["name"]).strip()
    if not name:
        raise ValueError("Facility record without a name")

    aliases_raw = row.get("aliases", row.get("alt")) or ()
    if isinstance(aliases_raw, str):
        aliases_raw = (aliases_raw,)

    return Facility(
        name=name,
        category=str(row.get("category") or row.get("type") or "").strip(),
        area=str(row.get("area") or "").strip(),
        position=GeoPoint(lat=float(row["lat"]), lng=float(row["lng"])),
        aliases=tuple(str(a) for a in aliases_raw),
        popularity=int(row.get("popularity", row.get("pop")) or 0),
    )


def parse_facility_records(data: Any) -> tuple[Facility, ...]:
    if not isinstance(data, list):
        raise CollaboratorUnavailable(
            f"Facility source returned {type(data).__name__}, expected a list"
        )
    try:
        return tuple(_facility_from_record(row) for row in data)
    except (KeyError, TypeError, ValueError) as exc:
        raise CollaboratorUnavailable(f"Malformed facility record: {exc}") from exc


@dataclass(slots=True)
class LocalFacilityRepository(IFacilityRepository):
    """Reads facilities from a JSON file on disk."""

    path: str | Path

    async def load_facilities(self) -> tuple[Facility, ...]:
        try:
            with Path(self.path).open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            raise CollaboratorUnavailable(f"Cannot read {self.path}: {exc}") from exc
        return parse_facility_records(data)


@dataclass(slots=True)
class HttpFacilityRepository(IFacilityRepository):
    """Fetches facilities from an HTTP(S) URL.

    Env vars:
      - FACILITIES_TIMEOUT_S: request timeout (default 10)
    """

    url: str
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_s is None:
            self.timeout_s = env_float("FACILITIES_TIMEOUT_S", 10.0)

    async def load_facilities(self) -> tuple[Facility, ...]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.get(self.url, headers={"Accept": "application/json"})
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CollaboratorUnavailable(f"Facility fetch failed: {exc}") from exc
        return parse_facility_records(data)


@dataclass(slots=True)
class S3FacilityRepository(IFacilityRepository):
    """Reads facilities from an object in S3 (or LocalStack)."""

    bucket: str
    key: str

    async def load_facilities(self) -> tuple[Facility, ...]:
        try:
            obj = s3_client().get_object(Bucket=self.bucket, Key=self.key)
            data = json.loads(obj["Body"].read())
        except Exception as exc:
            raise CollaboratorUnavailable(
                f"Cannot read s3://{self.bucket}/{self.key}: {exc}"
            ) from exc
        return parse_facility_records(data)


def facility_repository_for(source: str | None = None) -> IFacilityRepository:
    """Pick a repository for a source location.

    Env vars:
      - FACILITIES_SOURCE: local path, http(s):// URL or s3://bucket/key
        (default site/facilities.json)
    """

    raw = (source or os.getenv("FACILITIES_SOURCE") or DEFAULT_FACILITIES_SOURCE).strip()

    if raw.lower().startswith(("http://", "https://")):
        return HttpFacilityRepository(url=raw)

    if raw.lower().startswith("s3://"):
        without = raw[5:]
        parts = without.split("/", 1)
        bucket = parts[0].strip()
        key = parts[1].strip() if len(parts) > 1 else ""
        if not bucket or not key:
            raise RuntimeError(f"Invalid FACILITIES_SOURCE: {raw}")
        return S3FacilityRepository(bucket=bucket, key=key)

    return LocalFacilityRepository(path=raw)
