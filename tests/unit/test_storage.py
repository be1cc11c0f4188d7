"""Unit tests for initializer guard inspection."""

import json
from typing import Dict, List, Tuple

import pytest
import responses

from forge_deployments.compiled import CompiledOutputStore
from forge_deployments.exceptions import DeploymentDoesNotExistError, StorageSlotNotFoundError
from forge_deployments.registry import DeploymentRegistry
from forge_deployments.storage import (
    InitializedSlotReader,
    extract_byte,
    find_initialized_slot,
    read_storage_word,
)

RPC_URL = "http://test-rpc.example.com"
GUARD = "0xAA00000000000000000000000000000000000003"
GUARD_PROXY = "0xAA00000000000000000000000000000000000004"


class TestFindInitializedSlot:
    """Test the find_initialized_slot function."""

    def test_finds_uint8_guard(self, compiled_store: CompiledOutputStore):
        """Test locating a packed _initialized variable."""
        slot = find_initialized_slot(compiled_store.get("OwnedGuard").storage_layout)

        assert slot.label == "_initialized"
        assert slot.type == "t_uint8"
        assert slot.slot == "0"
        assert slot.offset == 20
        assert slot.contract == "src/OwnedGuard.sol:OwnedGuard"
        assert slot.id == 14

    def test_accepts_bool_guard(self):
        """Test that a bool _initialized variable is also accepted."""
        layout = {
            "storage": [
                {"astId": 1, "contract": "C", "label": "_initialized", "offset": 0, "slot": "3",
                 "type": "t_bool"},
            ]
        }

        assert find_initialized_slot(layout).slot == "3"

    def test_ignores_wider_types(self):
        """Test that an _initialized variable wider than one byte is rejected."""
        layout = {
            "storage": [
                {"astId": 1, "contract": "C", "label": "_initialized", "offset": 0, "slot": "0",
                 "type": "t_uint64"},
            ]
        }

        with pytest.raises(StorageSlotNotFoundError):
            find_initialized_slot(layout)

    def test_missing_guard_raises(self, compiled_store: CompiledOutputStore):
        """Test that contracts without a guard raise StorageSlotNotFoundError."""
        with pytest.raises(StorageSlotNotFoundError):
            find_initialized_slot(compiled_store.get("Greeter").storage_layout)


class TestExtractByte:
    """Test the extract_byte function."""

    def test_low_byte(self):
        assert extract_byte(0xFF01, 0) == 0x01

    def test_offset_byte(self):
        """Test reading a byte packed after a 20-byte address."""
        word = (0x02 << (20 * 8)) | int("f39fd6e51aad88f6f4ce6ab8827279cfffb92266", 16)

        assert extract_byte(word, 20) == 2

    def test_zero_word(self):
        assert extract_byte(0, 31) == 0


class TestReadStorageWord:
    """Test the read_storage_word function."""

    @responses.activate
    def test_parses_hex_word(self):
        """Test that the returned word is parsed from hex."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "result": "0x" + "00" * 11 + "01" + "ab" * 20},
            status=200,
        )

        word = read_storage_word(RPC_URL, GUARD, 0)

        assert extract_byte(word, 20) == 1

    @responses.activate
    def test_rpc_request_format(self):
        """Test that RPC request has correct format."""

        def request_callback(request):
            body = json.loads(request.body)
            assert body["jsonrpc"] == "2.0"
            assert body["method"] == "eth_getStorageAt"
            assert body["params"] == [GUARD, hex(5), "latest"]

            return (200, {}, json.dumps({"jsonrpc": "2.0", "id": body["id"], "result": "0x0"}))

        responses.add_callback(
            responses.POST,
            RPC_URL,
            callback=request_callback,
            content_type="application/json",
        )

        assert read_storage_word(RPC_URL, GUARD, 5) == 0

    @responses.activate
    def test_handles_rpc_errors(self):
        """Test that RPC errors raise ValueError."""
        responses.add(
            responses.POST,
            RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "header not found"}},
            status=200,
        )

        with pytest.raises(ValueError):
            read_storage_word(RPC_URL, GUARD, 0)

    @responses.activate
    def test_http_error_status(self):
        """Test that non-200 responses raise RuntimeError."""
        responses.add(responses.POST, RPC_URL, body="Network error", status=500)

        with pytest.raises(RuntimeError):
            read_storage_word(RPC_URL, GUARD, 0)

    @responses.activate
    def test_network_error_handling(self):
        """Test that connection failures raise RuntimeError."""
        # No responses registered: the request fails with ConnectionError
        with pytest.raises(RuntimeError):
            read_storage_word(RPC_URL, GUARD, 0)


class TestInitializedSlotReader:
    """Test the InitializedSlotReader class."""

    @pytest.fixture
    def storage(self) -> Dict[Tuple[str, int], int]:
        return {
            (GUARD, 0): 1 << (20 * 8),
            (GUARD_PROXY, 0): 3 << (20 * 8),
        }

    @pytest.fixture
    def reads(self) -> List[Tuple[str, int]]:
        return []

    @pytest.fixture
    def reader(
        self,
        registry: DeploymentRegistry,
        compiled_store: CompiledOutputStore,
        storage: Dict[Tuple[str, int], int],
        reads: List[Tuple[str, int]],
    ) -> InitializedSlotReader:
        def fake_reader(address: str, slot: int) -> int:
            reads.append((address, slot))
            return storage.get((address, slot), 0)

        return InitializedSlotReader(registry, compiled_store, fake_reader)

    def test_reads_contract_storage(self, reader, registry: DeploymentRegistry, reads):
        """Test reading the guard of a directly deployed contract."""
        registry.save("OwnedGuard", GUARD)

        assert reader.load("OwnedGuard") == 1
        assert reads == [(GUARD, 0)]

    def test_reads_proxy_storage(self, reader, registry: DeploymentRegistry, reads):
        """Test that proxied contracts are read at their proxy address."""
        registry.save("OwnedGuard", GUARD)
        registry.save("OwnedGuardProxy", GUARD_PROXY)

        assert reader.load("OwnedGuard", is_proxy=True) == 3
        assert reads == [(GUARD_PROXY, 0)]

    def test_missing_deployment_raises(self, reader):
        """Test that an undeployed contract cannot be inspected."""
        with pytest.raises(DeploymentDoesNotExistError):
            reader.load("OwnedGuard")

    def test_missing_proxy_raises(self, reader, registry: DeploymentRegistry):
        """Test that is_proxy requires a proxy deployment."""
        registry.save("OwnedGuard", GUARD)

        with pytest.raises(DeploymentDoesNotExistError) as exc_info:
            reader.load("OwnedGuard", is_proxy=True)

        assert exc_info.value.name == "OwnedGuardProxy"

    def test_does_not_write(self, reader, registry: DeploymentRegistry, ledger):
        """Test that reading a slot does not record anything."""
        registry.save("OwnedGuard", GUARD)
        before = ledger.read_all()

        reader.load("OwnedGuard")

        assert ledger.read_all() == before
