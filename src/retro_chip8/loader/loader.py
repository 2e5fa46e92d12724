# retro_chip8/loader/loader.py
"""
ROMローダーモジュール。
ヘッダやチェックサムを持たない生のCHIP-8バイナリをプログラム領域にロードします。
"""
import logging

from retro_chip8.transport.bus import Bus
from retro_chip8.core.errors import RomTooLargeError
from retro_chip8.arch.chip8.constants import MEMORY_SIZE, PROGRAM_START

logger = logging.getLogger(__name__)

class RomLoader:
    """
    CHIP-8 ROMイメージを、バス上の start_address 以降に書き込むローダー。
    """
    def __init__(self, start_address: int = PROGRAM_START):
        self._start_address = start_address

    # @intent:responsibility プログラム領域の容量（バイト数）を返します。
    # @intent:rationale バスにそれ以上のデバイスが接続されていても、CHIP-8の4KB空間を上限とします。
    def capacity(self, bus: Bus) -> int:
        return min(bus.get_address_limit(), MEMORY_SIZE) - self._start_address

    # @intent:responsibility バイト列をプログラム領域に書き込み、書き込んだバイト数を返します。
    # @intent:pre-condition サイズは容量以下であること。超過時は何も書き込まずにRomTooLargeErrorを送出します。
    def load_bytes(self, data: bytes, bus: Bus) -> int:
        data = bytes(data)
        capacity = self.capacity(bus)
        if len(data) > capacity:
            raise RomTooLargeError(len(data), capacity)
        bus.load(self._start_address, data)
        logger.debug("Loaded %d bytes at %#05x.", len(data), self._start_address)
        return len(data)

    def load_file(self, file_path: str, bus: Bus) -> int:
        with open(file_path, 'rb') as f:
            data = f.read()
        return self.load_bytes(data, bus)
