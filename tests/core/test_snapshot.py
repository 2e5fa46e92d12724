# tests/core/test_snapshot.py
"""
retro_chip8.core.snapshotモジュールの単体テスト。
"""
import pytest
from retro_chip8.core.state import CpuState
from retro_chip8.core.snapshot import (
    BusAccessType,
    BusAccess,
    Operation,
    Metadata,
    Snapshot,
)

# @intent:test_suite CPUとバスの状態を記録する不変スナップショットデータ構造の検証。

class TestBusAccess:
    # @intent:test_case_immutability BusAccessが不変であることを検証します。
    def test_bus_access_immutability(self):
        access = BusAccess(address=0x200, data=0xAA, access_type=BusAccessType.READ)
        with pytest.raises(AttributeError):
            access.address = 0x300

class TestOperation:
    def test_operation_defaults(self):
        op = Operation(opcode_hex="00E0", mnemonic="CLS")
        assert op.operands == []
        assert op.length == 2
        assert op.cycle_count == 1

    def test_operation_immutability(self):
        op = Operation(opcode_hex="1200", mnemonic="JP", operands=["$200"])
        with pytest.raises(AttributeError):
            op.mnemonic = "CALL"

class TestMetadata:
    def test_metadata_init(self):
        meta = Metadata(cycle_count=10, instruction_text="CLS")
        assert meta.cycle_count == 10
        assert meta.instruction_text == "CLS"
        assert Metadata(cycle_count=1).instruction_text is None

class TestSnapshot:
    @pytest.fixture
    def sample_data(self):
        state = CpuState(pc=0x202)
        operation = Operation(opcode_hex="6A05", mnemonic="LD", operands=["VA", "#$05"])
        bus_activity = [
            BusAccess(address=0x200, data=0x6A, access_type=BusAccessType.READ),
            BusAccess(address=0x300, data=0x05, access_type=BusAccessType.WRITE),
        ]
        metadata = Metadata(cycle_count=1, instruction_text="LD VA, #$05")
        return state, operation, bus_activity, metadata

    def test_snapshot_init(self, sample_data):
        state, operation, bus_activity, metadata = sample_data
        snapshot = Snapshot(state=state, operation=operation, metadata=metadata, bus_activity=bus_activity)
        assert snapshot.state == state
        assert snapshot.operation == operation
        assert snapshot.metadata == metadata

    def test_snapshot_immutability(self, sample_data):
        state, operation, bus_activity, metadata = sample_data
        snapshot = Snapshot(state=state, operation=operation, metadata=metadata, bus_activity=bus_activity)
        with pytest.raises(AttributeError):
            snapshot.state = CpuState(pc=0x400)

    def test_snapshot_written_addresses(self, sample_data):
        state, operation, bus_activity, metadata = sample_data
        snapshot = Snapshot(state=state, operation=operation, metadata=metadata, bus_activity=bus_activity)
        assert snapshot.written_addresses() == [0x300]

    # @intent:test_case_default_factory_bus_activity 独立したリストインスタンスが生成されることを検証します。
    def test_snapshot_default_factory_bus_activity(self):
        state = CpuState()
        operation = Operation(opcode_hex="00E0", mnemonic="CLS")
        metadata = Metadata(cycle_count=1)
        snapshot1 = Snapshot(state=state, operation=operation, metadata=metadata)
        snapshot2 = Snapshot(state=state, operation=operation, metadata=metadata)
        assert snapshot1.bus_activity is not snapshot2.bus_activity
