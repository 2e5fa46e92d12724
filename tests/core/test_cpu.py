# tests/core/test_cpu.py
"""
retro_chip8.core.cpuモジュールの単体テスト。
"""
import pytest
from typing import Dict, List

from retro_chip8.core.state import CpuState
from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Snapshot, Operation
from retro_chip8.transport.bus import Bus, RAM, BusAccessType
from retro_chip8.common.types import RegisterLayoutInfo, RegisterInfo

# @intent:test_suite CPUの状態管理と抽象CPUの命令サイクル (Template Method) を検証します。

class DummyCpu(AbstractCpu):
    """1バイト命令を読み、0x0020に0xFFを書き込むだけのテスト用CPU。"""
    def __init__(self, bus: Bus, initial_pc: int = 0x0000):
        self._initial_pc = initial_pc
        super().__init__(bus)

    def _create_initial_state(self) -> CpuState:
        return CpuState(pc=self._initial_pc)

    def _fetch(self) -> int:
        opcode = self._bus.read(self._state.pc)
        self._state.pc += 1
        return opcode

    def _decode(self, opcode: int) -> Operation:
        if opcode == 0x00:
            return Operation(opcode_hex=f"{opcode:02X}", mnemonic="NOP", length=1)
        return Operation(opcode_hex=f"{opcode:02X}", mnemonic="UNKNOWN", operands=[f"${opcode:02X}"], length=1)

    def _execute(self, operation: Operation) -> None:
        self._bus.write(0x0020, 0xFF)

    def get_register_map(self) -> Dict[str, int]:
        return {"PC": self._state.pc}

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [RegisterLayoutInfo("Test Group", [RegisterInfo("PC", 16)])]

    def get_flag_state(self) -> Dict[str, bool]:
        return {"Z": False}

class TestCpuState:
    def test_cpu_state_init_default(self):
        assert CpuState().pc == 0x0000

    def test_cpu_state_mutability(self):
        state = CpuState()
        state.pc = 0x1000
        assert state.pc == 0x1000

class TestAbstractCpu:
    @pytest.fixture
    def setup_cpu(self):
        bus = Bus()
        ram = RAM(256)
        bus.register_device(0x0000, 0x00FF, ram)
        cpu = DummyCpu(bus, initial_pc=0x0010)
        return cpu, bus, ram

    def test_abstract_cpu_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            AbstractCpu(Bus())

    # @intent:test_case_reset reset()が状態を新しいインスタンスに置き換えることを検証します。
    def test_abstract_cpu_reset(self, setup_cpu):
        cpu, _, _ = setup_cpu
        old_state = cpu.get_state()
        old_state.pc = 0xAAAA
        cpu.reset()
        assert cpu.get_state().pc == 0x0010
        assert cpu.get_state() is not old_state
        assert cpu.get_cycle_count() == 0

    # @intent:test_case_step step()がフェッチ→デコード→実行→Snapshot生成を行うことを検証します。
    def test_abstract_cpu_step(self, setup_cpu):
        cpu, bus, _ = setup_cpu
        bus.write(0x0010, 0x12)
        bus.get_and_clear_activity_log()

        snapshot = cpu.step()

        assert isinstance(snapshot, Snapshot)
        assert cpu.get_state().pc == 0x0011
        assert snapshot.state == cpu.get_state()
        assert snapshot.operation.mnemonic == "UNKNOWN"
        assert snapshot.metadata.instruction_text == "UNKNOWN $12"
        assert snapshot.metadata.cycle_count == 1
        assert [(a.address, a.access_type) for a in snapshot.bus_activity] == [
            (0x0010, BusAccessType.READ),
            (0x0020, BusAccessType.WRITE),
        ]

    # @intent:test_case_snapshot_copy Snapshotの状態が以降の実行で変化しないことを検証します。
    def test_snapshot_state_is_detached(self, setup_cpu):
        cpu, _, _ = setup_cpu
        snapshot = cpu.step()
        cpu.step()
        assert snapshot.state.pc == 0x0011
        assert cpu.get_state().pc == 0x0012
        assert cpu.get_cycle_count() == 2
