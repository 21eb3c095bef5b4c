"""
Data models for the info payload and the rendered panel.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class InfoResponse:
    """
    Fields read from the IPPure info document.

    Every field is optional; the endpoint may omit or null any of them.
    """
    ip: Optional[str] = None
    country_code: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    asn: Optional[Any] = None
    as_organization: Optional[str] = None
    fraud_score: Optional[Any] = None
    latitude: Optional[Any] = None
    longitude: Optional[Any] = None
    is_residential: Optional[bool] = None
    is_broadcast: Optional[bool] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'InfoResponse':
        """
        Build an InfoResponse from the decoded JSON object.

        Args:
            document: Parsed response body

        Returns:
            InfoResponse with None for every missing key
        """
        return cls(
            ip=document.get('ip'),
            country_code=document.get('countryCode'),
            country=document.get('country'),
            region=document.get('region'),
            city=document.get('city'),
            asn=document.get('asn'),
            as_organization=document.get('asOrganization'),
            fraud_score=document.get('fraudScore'),
            latitude=document.get('latitude'),
            longitude=document.get('longitude'),
            is_residential=document.get('isResidential'),
            is_broadcast=document.get('isBroadcast'),
            raw=dict(document)
        )


@dataclass(frozen=True)
class RenderResult:
    """Final record handed to the host."""
    title: str
    content: str
    icon: str
    icon_color: str

    def to_dict(self) -> Dict[str, str]:
        """Return the record with the host's key names."""
        return {
            'title': self.title,
            'content': self.content,
            'icon': self.icon,
            'icon-color': self.icon_color,
        }
