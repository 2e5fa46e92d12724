# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通定義とユーティリティ。
"""
from dataclasses import dataclass
from enum import Enum

from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8CpuState

# @intent:responsibility デコード結果となる命令の種類を列挙します。35命令 + 未定義命令。
class InstructionKind(Enum):
    CLS = "00E0"
    RET = "00EE"
    JP_ADDR = "1nnn"
    CALL_ADDR = "2nnn"
    SE_VX_BYTE = "3xkk"
    SNE_VX_BYTE = "4xkk"
    SE_VX_VY = "5xy0"
    LD_VX_BYTE = "6xkk"
    ADD_VX_BYTE = "7xkk"
    LD_VX_VY = "8xy0"
    OR_VX_VY = "8xy1"
    AND_VX_VY = "8xy2"
    XOR_VX_VY = "8xy3"
    ADD_VX_VY = "8xy4"
    SUB_VX_VY = "8xy5"
    SHR_VX_VY = "8xy6"
    SUBN_VX_VY = "8xy7"
    SHL_VX_VY = "8xyE"
    SNE_VX_VY = "9xy0"
    LD_I_ADDR = "Annn"
    JP_V0_ADDR = "Bnnn"
    RND_VX_BYTE = "Cxkk"
    DRW_VX_VY_N = "Dxyn"
    SKP_VX = "Ex9E"
    SKNP_VX = "ExA1"
    LD_VX_DT = "Fx07"
    LD_VX_K = "Fx0A"
    LD_DT_VX = "Fx15"
    LD_ST_VX = "Fx18"
    ADD_I_VX = "Fx1E"
    LD_F_VX = "Fx29"
    LD_B_VX = "Fx33"
    LD_I_VX = "Fx55"
    LD_VX_I = "Fx65"
    UNKNOWN = "????"

# @intent:responsibility CHIP-8の命令語を、命令種別と分解済みのフィールドとともに保持します。
# @intent:rationale 命令語は一度だけデコードし、実行側は種別 (kind) のみで分岐します。
@dataclass(frozen=True)
class Chip8Operation(Operation):
    """
    デコード済みのCHIP-8命令。
    x, y はレジスタ番号、n は下位4bit、nn は下位8bit、nnn は下位12bit。
    """
    kind: InstructionKind = InstructionKind.UNKNOWN
    x: int = 0
    y: int = 0
    n: int = 0
    nn: int = 0
    nnn: int = 0

# @intent:utility_function 16bit命令語を4つのニブル (op, x, y, n) に分解します。
def split_nibbles(word: int) -> tuple:
    return (word >> 12) & 0xF, (word >> 8) & 0xF, (word >> 4) & 0xF, word & 0xF

# @intent:utility_function 次の命令をスキップします（PC += 2）。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF
