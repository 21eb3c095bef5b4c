"""
Unit tests for rendering info documents into panel text.
"""

import pytest
from ippure.errors import ParseError, TransportError
from ippure.models import InfoResponse
from ippure.options import parse_arguments
from ippure.renderer import build_lines, build_title, render_failure, render_info

US_FLAG = "\U0001F1FA\U0001F1F8"

SAMPLE_DOCUMENT = {
    "ip": "203.0.113.7",
    "countryCode": "US",
    "city": "Ashburn",
    "region": "VA",
    "country": "United States",
    "asn": 14061,
    "asOrganization": "DigitalOcean",
    "fraudScore": 5,
    "latitude": 39.0,
    "longitude": -77.5,
    "isResidential": False,
    "isBroadcast": False
}


class TestInfoResponse:
    """Test cases for InfoResponse.from_document."""

    def test_reads_known_fields(self):
        """Test camelCase keys map onto fields."""
        info = InfoResponse.from_document(SAMPLE_DOCUMENT)
        assert info.ip == "203.0.113.7"
        assert info.country_code == "US"
        assert info.as_organization == "DigitalOcean"
        assert info.fraud_score == 5
        assert info.is_residential is False
        assert info.raw == SAMPLE_DOCUMENT

    def test_missing_fields_are_none(self):
        """Test that an empty document yields all None."""
        info = InfoResponse.from_document({})
        assert info.ip is None
        assert info.asn is None
        assert info.is_broadcast is None


class TestBuildTitle:
    """Test cases for build_title."""

    def test_flag_prefixed(self):
        """Test default title."""
        info = InfoResponse.from_document(SAMPLE_DOCUMENT)
        assert build_title(info, parse_arguments("")) == f"{US_FLAG} 203.0.113.7"

    def test_flag_disabled(self):
        """Test title without the flag."""
        info = InfoResponse.from_document(SAMPLE_DOCUMENT)
        assert build_title(info, parse_arguments("FLAG=0")) == "203.0.113.7"

    def test_masked(self):
        """Test masked title."""
        info = InfoResponse.from_document(SAMPLE_DOCUMENT)
        assert build_title(info, parse_arguments("MASK=1")) == f"{US_FLAG} 203.0.*.*"

    def test_missing_country_code(self):
        """Test that no flag and no stray space appear without a country."""
        info = InfoResponse(ip="2001:db8::1")
        assert build_title(info, parse_arguments("")) == "2001:db8::1"

    def test_missing_ip(self):
        """Test title when the document has no address."""
        assert build_title(InfoResponse(), parse_arguments("")) == "N/A"
        assert build_title(InfoResponse(), parse_arguments("MASK=1")) == "N/A"

    def test_non_string_ip(self):
        """Test that numeric addresses are rendered as text."""
        info = InfoResponse(ip=12345)
        assert build_title(info, parse_arguments("")) == "12345"
        assert build_title(info, parse_arguments("MASK=1")) == "12345..*.*"


class TestBuildLines:
    """Test cases for build_lines."""

    def setup_method(self):
        """Set up test fixtures."""
        self.info = InfoResponse.from_document(SAMPLE_DOCUMENT)

    def test_all_sections(self):
        """Test default sections in order."""
        lines = build_lines(self.info, parse_arguments(""))
        assert lines == [
            "📍 Ashburn, VA, United States",
            "🏢 AS14061 · DigitalOcean",
            "🛡️ 风险: 5/100",
            "🌐 39, -77.5",
            "🖥️ 非住宅 IP",
        ]

    def test_all_optional_sections_disabled(self):
        """Test that only the location line remains."""
        options = parse_arguments("ASN=0&ORG=0&RISK=0&GEO=0&RESIDENTIAL=0")
        assert build_lines(self.info, options) == ["📍 Ashburn, VA, United States"]

    def test_asn_only(self):
        """Test the ASN line without the organisation."""
        lines = build_lines(self.info, parse_arguments("ORG=0"))
        assert "🏢 AS14061" in lines

    def test_org_only(self):
        """Test the ASN line without the number."""
        lines = build_lines(self.info, parse_arguments("ASN=0"))
        assert "🏢 DigitalOcean" in lines

    def test_asn_line_skipped_without_data(self):
        """Test that the ASN line needs at least one value."""
        info = InfoResponse(city="Berlin")
        lines = build_lines(info, parse_arguments(""))
        assert not any(line.startswith("🏢") for line in lines)

    def test_risk_line_skipped_without_score(self):
        """Test that a missing score drops the risk line."""
        info = InfoResponse(city="Berlin")
        lines = build_lines(info, parse_arguments(""))
        assert not any(line.startswith("🛡️") for line in lines)

    def test_zero_risk_shown(self):
        """Test that a score of zero is still a score."""
        info = InfoResponse(fraud_score=0)
        assert "🛡️ 风险: 0/100" in build_lines(info, parse_arguments(""))

    def test_geo_defaults(self):
        """Test that missing coordinates render as N/A."""
        info = InfoResponse(latitude=52.52)
        assert "🌐 52.52, N/A" in build_lines(info, parse_arguments(""))

    def test_location_skips_empty_parts(self):
        """Test that the location line omits missing parts."""
        info = InfoResponse(city="", region=None, country="Japan")
        assert build_lines(info, parse_arguments(""))[0] == "📍 Japan"

    def test_empty_location(self):
        """Test that the location line is present even when empty."""
        assert build_lines(InfoResponse(), parse_arguments(""))[0] == "📍 "

    @pytest.mark.parametrize("residential,broadcast,expected", [
        (True, False, "🏠 原生住宅 IP"),
        (False, None, "🖥️ 非住宅 IP"),
        (True, True, "🏠 原生住宅 IP | 📡 广播 IP"),
        (None, True, "📡 广播 IP"),
    ])
    def test_residential_tags(self, residential, broadcast, expected):
        """Test residential and broadcast tag combinations."""
        info = InfoResponse(is_residential=residential, is_broadcast=broadcast)
        assert build_lines(info, parse_arguments(""))[-1] == expected

    def test_residential_tags_need_explicit_flags(self):
        """Test that no tag line appears without explicit flags."""
        info = InfoResponse(is_residential=None, is_broadcast=False)
        lines = build_lines(info, parse_arguments("GEO=0"))
        assert lines == ["📍 "]


class TestRender:
    """Test cases for render_info and render_failure."""

    def test_render_info_joins_lines(self):
        """Test that content has no empty lines for skipped sections."""
        info = InfoResponse.from_document(SAMPLE_DOCUMENT)
        title, content = render_info(info, parse_arguments("RISK=0&GEO=0"))

        assert title == f"{US_FLAG} 203.0.113.7"
        assert content == "📍 Ashburn, VA, United States\n🏢 AS14061 · DigitalOcean\n🖥️ 非住宅 IP"

    def test_render_transport_failure(self):
        """Test failure rendering for transport errors."""
        title, content = render_failure(TransportError(ConnectionError("connection refused")))
        assert title == "IPPure ❌"
        assert content == "查询失败: connection refused"

    def test_render_parse_failure(self):
        """Test failure rendering for parse errors."""
        title, content = render_failure(ParseError("<html>"))
        assert title == "IPPure ❌"
        assert content == "查询失败: JSON 解析失败: <html>"
