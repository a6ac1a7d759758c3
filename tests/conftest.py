import pytest

from contract_source_metadata import InMemoryStorage, MetadataAccessor, MetadataRecord


NFT_TUTORIAL_VIEW = {
    "version": "39f2d2646f2f60e18ab53337501370dc02a5661c",
    "link": "https://github.com/near-examples/nft-tutorial",
    "standards": [
        {"standard": "nep330", "version": "1.1.0"},
        {"standard": "nep171", "version": "1.0.0"},
        {"standard": "nep177", "version": "2.0.0"},
    ],
}


@pytest.fixture
def nft_tutorial_view():
    return {
        "version": NFT_TUTORIAL_VIEW["version"],
        "link": NFT_TUTORIAL_VIEW["link"],
        "standards": [dict(entry) for entry in NFT_TUTORIAL_VIEW["standards"]],
    }


@pytest.fixture
def nft_tutorial_record(nft_tutorial_view):
    return MetadataRecord.from_public_view(nft_tutorial_view)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def accessor(storage):
    return MetadataAccessor(storage)
