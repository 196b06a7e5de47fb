from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from .utils import as_dict, as_float, as_text


class ListingMode(str, Enum):
    FUTURE = "future"
    PAST = "past"


@dataclass(frozen=True)
class Location:
    country: str = ""
    address: str = ""
    address_alt: str = ""
    city: str = ""
    address_num: str = ""
    name: str = ""
    lon: float = 0.0
    state: str = ""
    neighbourhood: str = ""
    zip_code: str = ""
    lat: float = 0.0

    @classmethod
    def from_dict(cls, raw: Any) -> "Location":
        d = as_dict(raw)
        return cls(
            country=as_text(d.get("country")),
            address=as_text(d.get("address")),
            address_alt=as_text(d.get("address_alt")),
            city=as_text(d.get("city")),
            address_num=as_text(d.get("address_num")),
            name=as_text(d.get("name")),
            lon=as_float(d.get("lon")),
            state=as_text(d.get("state")),
            neighbourhood=as_text(d.get("neighbourhood")),
            zip_code=as_text(d.get("zip_code")),
            lat=as_float(d.get("lat")),
        )


@dataclass(frozen=True)
class Images:
    original: str = ""
    xs: str = ""
    lg: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Images":
        d = as_dict(raw)
        return cls(
            original=as_text(d.get("original")),
            xs=as_text(d.get("xs")),
            lg=as_text(d.get("lg")),
        )


@dataclass(frozen=True)
class DateFormats:
    # strings prontas vindas da API (não são parseadas)
    pt: str = ""
    en: str = ""
    es: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "DateFormats":
        d = as_dict(raw)
        return cls(pt=as_text(d.get("pt")), en=as_text(d.get("en")), es=as_text(d.get("es")))


@dataclass(frozen=True)
class Event:
    name: str = ""
    location: Location = field(default_factory=Location)
    images: Images = field(default_factory=Images)
    start_date_formats: DateFormats = field(default_factory=DateFormats)
    end_date_formats: DateFormats = field(default_factory=DateFormats)
    url: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Event":
        """
        Decodificação tolerante: campos ausentes ou null viram valores "zero".
        Quem chama garante que `raw` é um dict.
        """
        return cls(
            name=as_text(raw.get("name")),
            location=Location.from_dict(raw.get("location")),
            images=Images.from_dict(raw.get("images")),
            start_date_formats=DateFormats.from_dict(raw.get("start_date_formats")),
            end_date_formats=DateFormats.from_dict(raw.get("end_date_formats")),
            url=as_text(raw.get("url")),
        )
