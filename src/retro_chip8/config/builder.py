import logging
from typing import Tuple

from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.constants import MEMORY_SIZE
from .models import SystemConfig

logger = logging.getLogger(__name__)

# @intent:responsibility システム構成（Config）に基づいて、Bus、RAM、CPUを生成・接続します。
class SystemBuilder:
    def build_system(self, config: SystemConfig) -> Tuple[Chip8Cpu, Bus]:
        if config.architecture != "CHIP8":
            raise ValueError(f"Unsupported architecture: {config.architecture}")
        if config.memory_size != MEMORY_SIZE:
            raise ValueError(
                f"Unsupported memory size {config.memory_size:#x}: CHIP-8 memory is fixed at {MEMORY_SIZE:#x} bytes")

        bus = Bus()
        bus.register_device(0x0000, MEMORY_SIZE - 1, RAM(MEMORY_SIZE))

        cpu = Chip8Cpu(bus, config.quirks)
        logger.debug("Built CHIP-8 system (%#x bytes of RAM).", MEMORY_SIZE)
        return cpu, bus
