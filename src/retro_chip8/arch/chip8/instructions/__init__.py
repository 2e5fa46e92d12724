# src/retro_chip8/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation, InstructionKind, split_nibbles
from .maps import DECODE_TABLE, SYNTAX_MAP, EXECUTE_MAP

# @intent:responsibility 命令語の種別を優先順位付きテーブルから決定します。
def classify(word: int) -> InstructionKind:
    for mask, pattern, kind in DECODE_TABLE:
        if word & mask == pattern:
            return kind
    return InstructionKind.UNKNOWN

# @intent:responsibility CHIP-8の16bit命令語をデコードします。
def decode_opcode(word: int) -> Chip8Operation:
    """
    16bit命令語をデコードし、Chip8Operationを返します。
    一致するパターンが無い場合は InstructionKind.UNKNOWN となります。
    """
    word &= 0xFFFF
    kind = classify(word)
    _, x, y, n = split_nibbles(word)
    fields = dict(x=x, y=y, n=n, nn=word & 0xFF, nnn=word & 0xFFF, word=word)
    mnemonic, operand_formats = SYNTAX_MAP[kind]
    return Chip8Operation(
        opcode_hex=f"{word:04X}",
        mnemonic=mnemonic,
        operands=[fmt.format(**fields) for fmt in operand_formats],
        operand_bytes=[word >> 8, word & 0xFF],
        kind=kind,
        x=x,
        y=y,
        n=n,
        nn=word & 0xFF,
        nnn=word & 0xFFF,
    )

# @intent:responsibility デコードされたCHIP-8命令を実行します。
def execute_instruction(operation: Chip8Operation, state: Chip8CpuState, bus: Bus) -> None:
    """
    デコードされたCHIP-8命令を実行し、マシン状態を変更します。
    """
    EXECUTE_MAP[operation.kind](state, bus, operation)
