from dataclasses import dataclass, field

# @intent:responsibility 歴史的なインタプリタ間で解釈が分かれる命令 (Quirk) の選択を保持します。
@dataclass(frozen=True)
class QuirkConfig:
    shift_uses_vy: bool = True           # SHR/SHL の入力元を Vy とする (False なら Vx)
    index_overflow_sets_vf: bool = True  # ADD I, Vx で I >= 0x1000 のとき VF=1 (クリアはしない)
    stack_depth_warning: int = 16        # この深さを超えたCALLで警告を出す

@dataclass
class SystemConfig:
    architecture: str = "CHIP8"
    memory_size: int = 0x1000            # 固定値。0x1000 以外はSystemBuilderが拒否する
    quirks: QuirkConfig = field(default_factory=QuirkConfig)
