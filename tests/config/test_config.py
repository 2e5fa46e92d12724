# tests/config/test_config.py
"""
retro_chip8.config パッケージ (ConfigLoader, SystemBuilder) の単体テスト。
"""
import pytest

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import SystemConfig, QuirkConfig
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.core.errors import RomTooLargeError

# @intent:test_suite YAML構成の読み込みと、構成からのシステム組み立てを検証します。

class TestConfigLoader:
    def test_defaults_from_empty_document(self):
        config = ConfigLoader().load_from_string("")
        assert config == SystemConfig()

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "chip8.yaml"
        path.write_text(
            "architecture: chip8\n"
            "memory_size: 0x1000\n"
            "quirks:\n"
            "  shift_uses_vy: false\n"
            "  index_overflow_sets_vf: false\n"
            "  stack_depth_warning: 12\n"
        )
        config = ConfigLoader().load_from_file(str(path))
        assert config.architecture == "CHIP8"
        assert config.memory_size == 0x1000
        assert config.quirks == QuirkConfig(shift_uses_vy=False, index_overflow_sets_vf=False, stack_depth_warning=12)

    def test_hex_string_values(self):
        config = ConfigLoader().load_from_string('memory_size: "0x1000"\n')
        assert config.memory_size == 0x1000

    def test_partial_quirks_keep_defaults(self):
        config = ConfigLoader().load_from_string("quirks:\n  shift_uses_vy: false\n")
        assert config.quirks.shift_uses_vy is False
        assert config.quirks.index_overflow_sets_vf is True

    @pytest.mark.parametrize("text", [
        "- not\n- a mapping\n",
        "memory_size: lots\n",
        "memory_size: [1]\n",
        "quirks:\n  shift_uses_vy: maybe\n",
        "quirks:\n  stack_depth_warning: true\n",
    ])
    def test_invalid_documents(self, text):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string(text)

class TestSystemBuilder:
    def test_build_default_system(self):
        cpu, bus = SystemBuilder().build_system(SystemConfig())
        assert isinstance(cpu, Chip8Cpu)
        assert bus.get_address_limit() == 0x1000
        assert cpu.get_state().pc == 0x200

    def test_quirks_are_applied(self):
        quirks = QuirkConfig(shift_uses_vy=False)
        cpu, _ = SystemBuilder().build_system(SystemConfig(quirks=quirks))
        assert cpu.quirks is quirks
        assert cpu.get_state().quirks is quirks
        cpu.reset()
        assert cpu.get_state().quirks is quirks

    def test_unsupported_architecture(self):
        with pytest.raises(ValueError, match="Unsupported architecture: Z80"):
            SystemBuilder().build_system(SystemConfig(architecture="Z80"))

    def test_memory_too_small(self):
        with pytest.raises(ValueError):
            SystemBuilder().build_system(SystemConfig(memory_size=0x200))

    # @intent:test_case_fixed_memory 4KB以外のメモリサイズは拒否され、ROM容量が広がらないことを検証します。
    def test_non_standard_memory_is_rejected(self):
        with pytest.raises(ValueError, match="fixed at 0x1000"):
            SystemBuilder().build_system(SystemConfig(memory_size=0x2000))

    def test_standard_system_rejects_oversized_rom(self):
        cpu, bus = SystemBuilder().build_system(SystemConfig())
        assert bus.get_address_limit() == 0x1000
        with pytest.raises(RomTooLargeError):
            cpu.load_rom(bytes(0xE01))
