# tests/transport/test_bus.py
"""
retro_chip8.transport.busモジュールの単体テスト。
"""
import pytest
from retro_chip8.transport.bus import Bus, Device, RAM, BusAccessType

# @intent:test_suite 共通バスとRAMデバイスの基本的な機能とエラーハンドリングを検証します。

class TestRAM:
    """
    RAMデバイスの単体テスト。
    """
    # @intent:test_case_init RAMクラスが正しいサイズで0初期化されることを検証します。
    def test_ram_init_valid_size(self):
        ram = RAM(4096)
        assert ram.get_size() == 4096
        assert all(b == 0 for b in ram._memory)

    # @intent:test_case_init 無効なサイズでRAMを初期化するとValueErrorが発生することを検証します。
    def test_ram_init_invalid_size(self):
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(0)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(-1)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(1.5)

    def test_ram_read_write_within_bounds(self):
        ram = RAM(4)
        ram.write(0, 0x12)
        ram.write(3, 0x78)
        assert ram.read(0) == 0x12
        assert ram.read(3) == 0x78

    # @intent:test_case_oob 境界外アドレスへのアクセス時にIndexErrorが発生することを検証します。
    def test_ram_read_write_out_of_bounds(self):
        ram = RAM(4)
        with pytest.raises(IndexError, match="Address 4 out of bounds for RAM of size 4."):
            ram.read(4)
        with pytest.raises(IndexError, match="Address -1 out of bounds for RAM of size 4."):
            ram.write(-1, 0x00)

    # @intent:test_case_data 8bitを超えるデータの書き込みでValueErrorが発生することを検証します。
    def test_ram_write_invalid_data(self):
        ram = RAM(1)
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            ram.write(0, 0x100)

    def test_ram_clear(self):
        ram = RAM(8)
        ram.write(5, 0xAA)
        ram.clear()
        assert ram.read(5) == 0

class TestBus:
    """
    Busの単体テスト。
    """
    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x000, 0xFFF, RAM(0x1000))
        return bus

    def test_bus_read_write(self, bus):
        bus.write(0x0200, 0xAA)
        assert bus.read(0x0200) == 0xAA

    # @intent:test_case_unmapped マップされていないアドレスへのアクセス時にIndexErrorが発生することを検証します。
    def test_bus_access_unmapped_address(self, bus):
        with pytest.raises(IndexError, match="Address 0x1000 not mapped to any device."):
            bus.read(0x1000)
        with pytest.raises(IndexError, match="Address 0x1000 not mapped to any device."):
            bus.write(0x1000, 0xCC)

    def test_bus_register_invalid_address_range(self):
        bus = Bus()
        with pytest.raises(ValueError, match="Invalid address range"):
            bus.register_device(0x0010, 0x000F, RAM(16))

    def test_bus_register_ram_size_mismatch(self):
        bus = Bus()
        with pytest.raises(ValueError, match=r"Registered RAM device size \(10 bytes\)"):
            bus.register_device(0x0000, 0x000F, RAM(10))

    def test_bus_register_invalid_device_type(self):
        bus = Bus()
        class MyClass: pass
        with pytest.raises(TypeError, match="Device must be an instance of a class derived from Device."):
            bus.register_device(0x0000, 0x000F, MyClass())

    # @intent:test_case_log 読み書きがアクティビティログに記録され、取得時にクリアされることを検証します。
    def test_bus_activity_log(self, bus):
        bus.write(0x300, 0x01)
        bus.read(0x300)
        log = bus.get_and_clear_activity_log()
        assert [(a.address, a.data, a.access_type) for a in log] == [
            (0x300, 0x01, BusAccessType.WRITE),
            (0x300, 0x01, BusAccessType.READ),
        ]
        assert bus.get_and_clear_activity_log() == []

    # @intent:test_case_load load/peekはログに記録されないことを検証します。
    def test_bus_load_and_peek_are_not_logged(self, bus):
        bus.load(0x200, b"\x12\x34")
        assert bus.peek(0x200) == 0x12
        assert bus.peek(0x201) == 0x34
        assert bus.get_and_clear_activity_log() == []

    def test_bus_address_limit(self, bus):
        assert bus.get_address_limit() == 0x1000
        assert Bus().get_address_limit() == 0

    def test_bus_clear(self, bus):
        bus.write(0x250, 0x77)
        bus.clear()
        assert bus.peek(0x250) == 0
        assert bus.get_and_clear_activity_log() == []
