from contract_source_metadata import MetadataRecord
from contract_source_metadata.standards import (
    KNOWN_STANDARDS,
    missing_capabilities,
    required_methods,
    undeclared_standards,
)

NFT_METHODS = [
    "contract_source_metadata",
    "nft_transfer",
    "nft_transfer_call",
    "nft_token",
    "nft_metadata",
]


def test_required_methods():
    assert required_methods("nep330") == ("contract_source_metadata",)
    assert "nft_transfer" in required_methods("nep171")
    assert required_methods("unknown") == ()


def test_fully_implemented_record_has_no_gaps(nft_tutorial_record):
    assert missing_capabilities(nft_tutorial_record, NFT_METHODS) == {}


def test_missing_methods_reported(nft_tutorial_record):
    methods = [m for m in NFT_METHODS if m not in ("nft_metadata", "nft_transfer_call")]

    assert missing_capabilities(nft_tutorial_record, methods) == {
        "nep171": ["nft_transfer_call"],
        "nep177": ["nft_metadata"],
    }


def test_unknown_and_absent_standards_skipped():
    record = MetadataRecord(standards=[{"standard": "x-custom", "version": "0.1"}])

    assert missing_capabilities(record, []) == {}
    assert missing_capabilities(MetadataRecord(), []) == {}


def test_undeclared_standards():
    record = MetadataRecord(standards=[{"standard": "nep171", "version": "1.0.0"}])

    assert undeclared_standards(record, NFT_METHODS) == ["nep330", "nep177"]


def test_table_keys_are_declarable():
    for standard, methods in KNOWN_STANDARDS.items():
        record = MetadataRecord().with_standard(standard, "1.0.0")
        assert missing_capabilities(record, methods) == {}
