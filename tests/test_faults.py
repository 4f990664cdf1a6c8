"""
Faults (faults/)

Tests Fault, FaultDomain, Severity and the domain faults.
"""

import pytest

from vitebridge.faults import (
    ConfigInvalidFault,
    ConfigurationError,
    Fault,
    FaultDomain,
    ManifestMissingFault,
    ManifestParseError,
    Severity,
    UnresolvedEntry,
)


class TestFault:

    def test_requires_code_message_domain(self):
        with pytest.raises(TypeError):
            Fault(code="X")

    def test_domain_default_severity(self):
        fault = Fault(code="X", message="m", domain=FaultDomain.RESOLUTION)
        assert fault.severity == Severity.WARN

    def test_custom_domain_defaults_to_error(self):
        fault = Fault(code="X", message="m", domain=FaultDomain("theme"))
        assert fault.severity == Severity.ERROR

    def test_str(self):
        fault = Fault(code="X", message="went wrong", domain=FaultDomain.CONFIG)
        assert str(fault) == "[X] went wrong"

    def test_to_dict(self):
        fault = Fault(code="X", message="m", domain=FaultDomain.MANIFEST, metadata={"k": 1})
        assert fault.to_dict() == {
            "code": "X",
            "message": "m",
            "domain": "manifest",
            "severity": "fatal",
            "metadata": {"k": 1},
        }

    def test_domain_equality(self):
        assert FaultDomain.CONFIG == FaultDomain("config")
        assert FaultDomain.CONFIG == "config"
        assert hash(FaultDomain.CONFIG) == hash(FaultDomain("config"))


class TestDomainFaults:

    def test_manifest_missing(self):
        fault = ManifestMissingFault("dist/manifest.json")
        assert isinstance(fault, ConfigurationError)
        assert fault.code == "MANIFEST_MISSING"
        assert fault.severity == Severity.FATAL
        assert fault.metadata == {"path": "dist/manifest.json"}

    def test_config_invalid(self):
        fault = ConfigInvalidFault("dev_port", "not a port")
        assert isinstance(fault, ConfigurationError)
        assert "dev_port" in fault.message

    def test_manifest_parse_error(self):
        fault = ManifestParseError("m.json", "bad json")
        assert fault.domain == FaultDomain.MANIFEST
        assert fault.severity == Severity.FATAL
        assert "bad json" in str(fault)

    def test_unresolved_entry(self):
        fault = UnresolvedEntry("src/a.js", kind="import")
        assert fault.path == "src/a.js"
        assert fault.kind == "import"
        assert fault.severity == Severity.WARN
        assert fault.domain == FaultDomain.RESOLUTION
