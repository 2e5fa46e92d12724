# src/retro_chip8/arch/chip8/instructions/maps.py
"""
命令語パターンと命令実装のマッピング定義。
"""
from . import load
from . import alu
from . import control
from . import graphics
from .base import InstructionKind as K

# @intent:map (マスク, パターン, 命令種別) の優先順位付きデコードテーブル。
# @intent:rationale 上から順に照合し、最初に一致したものを採用する。
#                  4ニブル全一致 → 3ニブル一致 → 2ニブル一致 → 命令族のみ一致 の順に並べる。
DECODE_TABLE = [
    # 4ニブル全一致
    (0xFFFF, 0x00E0, K.CLS),
    (0xFFFF, 0x00EE, K.RET),

    # 命令族 + 下位8bit
    (0xF0FF, 0xE09E, K.SKP_VX),
    (0xF0FF, 0xE0A1, K.SKNP_VX),
    (0xF0FF, 0xF007, K.LD_VX_DT),
    (0xF0FF, 0xF00A, K.LD_VX_K),
    (0xF0FF, 0xF015, K.LD_DT_VX),
    (0xF0FF, 0xF018, K.LD_ST_VX),
    (0xF0FF, 0xF01E, K.ADD_I_VX),
    (0xF0FF, 0xF029, K.LD_F_VX),
    (0xF0FF, 0xF033, K.LD_B_VX),
    (0xF0FF, 0xF055, K.LD_I_VX),
    (0xF0FF, 0xF065, K.LD_VX_I),

    # 命令族 + 下位4bit
    (0xF00F, 0x5000, K.SE_VX_VY),
    (0xF00F, 0x8000, K.LD_VX_VY),
    (0xF00F, 0x8001, K.OR_VX_VY),
    (0xF00F, 0x8002, K.AND_VX_VY),
    (0xF00F, 0x8003, K.XOR_VX_VY),
    (0xF00F, 0x8004, K.ADD_VX_VY),
    (0xF00F, 0x8005, K.SUB_VX_VY),
    (0xF00F, 0x8006, K.SHR_VX_VY),
    (0xF00F, 0x8007, K.SUBN_VX_VY),
    (0xF00F, 0x800E, K.SHL_VX_VY),
    (0xF00F, 0x9000, K.SNE_VX_VY),

    # 命令族のみ
    (0xF000, 0x1000, K.JP_ADDR),
    (0xF000, 0x2000, K.CALL_ADDR),
    (0xF000, 0x3000, K.SE_VX_BYTE),
    (0xF000, 0x4000, K.SNE_VX_BYTE),
    (0xF000, 0x6000, K.LD_VX_BYTE),
    (0xF000, 0x7000, K.ADD_VX_BYTE),
    (0xF000, 0xA000, K.LD_I_ADDR),
    (0xF000, 0xB000, K.JP_V0_ADDR),
    (0xF000, 0xC000, K.RND_VX_BYTE),
    (0xF000, 0xD000, K.DRW_VX_VY_N),
]

# @intent:map 命令種別から (ニーモニック, オペランド書式) へのマッピング。書式は x, y, n, nn, nnn で展開される。
SYNTAX_MAP = {
    K.CLS: ("CLS", []),
    K.RET: ("RET", []),
    K.JP_ADDR: ("JP", ["${nnn:03X}"]),
    K.CALL_ADDR: ("CALL", ["${nnn:03X}"]),
    K.SE_VX_BYTE: ("SE", ["V{x:X}", "#${nn:02X}"]),
    K.SNE_VX_BYTE: ("SNE", ["V{x:X}", "#${nn:02X}"]),
    K.SE_VX_VY: ("SE", ["V{x:X}", "V{y:X}"]),
    K.LD_VX_BYTE: ("LD", ["V{x:X}", "#${nn:02X}"]),
    K.ADD_VX_BYTE: ("ADD", ["V{x:X}", "#${nn:02X}"]),
    K.LD_VX_VY: ("LD", ["V{x:X}", "V{y:X}"]),
    K.OR_VX_VY: ("OR", ["V{x:X}", "V{y:X}"]),
    K.AND_VX_VY: ("AND", ["V{x:X}", "V{y:X}"]),
    K.XOR_VX_VY: ("XOR", ["V{x:X}", "V{y:X}"]),
    K.ADD_VX_VY: ("ADD", ["V{x:X}", "V{y:X}"]),
    K.SUB_VX_VY: ("SUB", ["V{x:X}", "V{y:X}"]),
    K.SHR_VX_VY: ("SHR", ["V{x:X}", "V{y:X}"]),
    K.SUBN_VX_VY: ("SUBN", ["V{x:X}", "V{y:X}"]),
    K.SHL_VX_VY: ("SHL", ["V{x:X}", "V{y:X}"]),
    K.SNE_VX_VY: ("SNE", ["V{x:X}", "V{y:X}"]),
    K.LD_I_ADDR: ("LD", ["I", "${nnn:03X}"]),
    K.JP_V0_ADDR: ("JP", ["V0", "${nnn:03X}"]),
    K.RND_VX_BYTE: ("RND", ["V{x:X}", "#${nn:02X}"]),
    K.DRW_VX_VY_N: ("DRW", ["V{x:X}", "V{y:X}", "{n}"]),
    K.SKP_VX: ("SKP", ["V{x:X}"]),
    K.SKNP_VX: ("SKNP", ["V{x:X}"]),
    K.LD_VX_DT: ("LD", ["V{x:X}", "DT"]),
    K.LD_VX_K: ("LD", ["V{x:X}", "K"]),
    K.LD_DT_VX: ("LD", ["DT", "V{x:X}"]),
    K.LD_ST_VX: ("LD", ["ST", "V{x:X}"]),
    K.ADD_I_VX: ("ADD", ["I", "V{x:X}"]),
    K.LD_F_VX: ("LD", ["F", "V{x:X}"]),
    K.LD_B_VX: ("LD", ["B", "V{x:X}"]),
    K.LD_I_VX: ("LD", ["[I]", "V{x:X}"]),
    K.LD_VX_I: ("LD", ["V{x:X}", "[I]"]),
    K.UNKNOWN: ("UNKNOWN", ["${word:04X}"]),
}

# @intent:map 命令種別から実行関数へのマッピングテーブル。全ての InstructionKind を網羅する。
EXECUTE_MAP = {
    # Control
    K.RET: control.execute_ret,
    K.JP_ADDR: control.execute_jp_addr,
    K.CALL_ADDR: control.execute_call_addr,
    K.SE_VX_BYTE: control.execute_se_vx_byte,
    K.SNE_VX_BYTE: control.execute_sne_vx_byte,
    K.SE_VX_VY: control.execute_se_vx_vy,
    K.SNE_VX_VY: control.execute_sne_vx_vy,
    K.JP_V0_ADDR: control.execute_jp_v0_addr,
    K.SKP_VX: control.execute_skp_vx,
    K.SKNP_VX: control.execute_sknp_vx,
    K.UNKNOWN: control.execute_unknown,

    # Load/Store
    K.LD_VX_BYTE: load.execute_ld_vx_byte,
    K.LD_VX_VY: load.execute_ld_vx_vy,
    K.LD_I_ADDR: load.execute_ld_i_addr,
    K.LD_VX_DT: load.execute_ld_vx_dt,
    K.LD_VX_K: load.execute_ld_vx_k,
    K.LD_DT_VX: load.execute_ld_dt_vx,
    K.LD_ST_VX: load.execute_ld_st_vx,
    K.LD_F_VX: load.execute_ld_f_vx,
    K.LD_B_VX: load.execute_ld_b_vx,
    K.LD_I_VX: load.execute_ld_i_vx,
    K.LD_VX_I: load.execute_ld_vx_i,

    # ALU
    K.ADD_VX_BYTE: alu.execute_add_vx_byte,
    K.OR_VX_VY: alu.execute_or_vx_vy,
    K.AND_VX_VY: alu.execute_and_vx_vy,
    K.XOR_VX_VY: alu.execute_xor_vx_vy,
    K.ADD_VX_VY: alu.execute_add_vx_vy,
    K.SUB_VX_VY: alu.execute_sub_vx_vy,
    K.SHR_VX_VY: alu.execute_shr_vx_vy,
    K.SUBN_VX_VY: alu.execute_subn_vx_vy,
    K.SHL_VX_VY: alu.execute_shl_vx_vy,
    K.ADD_I_VX: alu.execute_add_i_vx,
    K.RND_VX_BYTE: alu.execute_rnd_vx_byte,

    # Graphics
    K.CLS: graphics.execute_cls,
    K.DRW_VX_VY_N: graphics.execute_drw_vx_vy_n,
}
