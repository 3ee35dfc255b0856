"""Risky-term table.

A TermMap maps a canonical risky term (lowercase, possibly several words) to
the phrase that replaces it.  It is an immutable value: build one, hand it to
a TermRewriter, never change it.  DEFAULT_TERM_MAP is the curated table for
Vietnamese short-video copy (TikTok / Reels moderation triggers).
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, List, Tuple, Union

TermPairs = Union[Mapping, Iterable[Tuple[str, str]]]


class TermMap(Mapping):
    """Immutable term -> replacement mapping with validated keys.

    Raises:
        ValueError: a term is empty, padded with whitespace, not lowercase,
            or duplicated; or a replacement is not a string.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: TermPairs = ()):
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        table = {}
        for term, replacement in pairs:
            if not isinstance(term, str) or not term:
                raise ValueError(f"ERROR: term must be a non-empty string, got {term!r}")
            if term != term.strip():
                raise ValueError(f"ERROR: term has leading/trailing whitespace: {term!r}")
            if term != term.lower():
                raise ValueError(f"ERROR: term must be lowercase: {term!r}")
            if term in table:
                raise ValueError(f"ERROR: duplicate term: {term!r}")
            if not isinstance(replacement, str):
                raise ValueError(f"ERROR: replacement for {term!r} must be a string")
            table[term] = replacement
        self._entries = MappingProxyType(table)

    def __getitem__(self, term: str) -> str:
        return self._entries[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TermMap({len(self)} terms)"

    def ordered_terms(self) -> List[str]:
        """Terms longest first; equal lengths in lexicographic order.

        A multi-word phrase is therefore always rewritten before any shorter
        term it contains ("flash sale" before "sale").
        """
        return sorted(self._entries, key=lambda term: (-len(term), term))


DEFAULT_TERM_MAP = TermMap({
    # ── Platforms & social media ──────────────────────────────────────────
    "shopee": "sàn Cam",
    "lazada": "sàn Xanh",
    "tiki": "sàn T",
    "facebook": "nền tảng FB",
    "instagram": "nền tảng IG",
    "youtube": "nền tảng YT",
    "tiktok": "nền tảng này",
    "link in bio": "thông tin ở bio",
    "link": "liên kết",
    "click": "nhấn vào",
    "comment": "để lại ý kiến",
    "share": "chia sẻ",
    "like": "thả tim",
    "follow": "theo dõi",
    "dm": "nhắn tin",
    "inbox": "nhắn tin cho mình",

    # ── Sales & pricing ───────────────────────────────────────────────────
    "mua bán": "trao đổi",
    "bán hàng": "chia sẻ",
    "mua ngay": "trải nghiệm ngay",
    "đặt hàng": "đăng ký",
    "thanh toán": "hoàn tất",
    "giảm giá": "ưu đãi",
    "khuyến mãi": "chương trình đặc biệt",
    "sale": "ưu đãi lớn",
    "flash sale": "giảm giá chớp nhoáng",
    "deal": "cơ hội tốt",
    "hot": "nổi bật",
    "trend": "xu hướng",
    "viral": "lan truyền",
    "miễn phí": "0 đồng",
    "free ship": "hỗ trợ phí vận chuyển",
    "rẻ nhất": "giá cực tốt",
    "giá rẻ": "giá ưu đãi",
    "giá sốc": "giá bất ngờ",
    "rẻ sập sàn": "giá cực tốt",
    "tiền": "ngân lượng",  # slang
    "tiền tệ": "tài chính",

    # ── Commitments & absolutes ───────────────────────────────────────────
    "cam kết": "tự tin",
    "đảm bảo 100%": "hỗ trợ tối đa",
    "chắc chắn": "tin rằng",
    "tuyệt đối": "vô cùng hiệu quả",
    "hiệu quả 100%": "hiệu quả rõ rệt",
    "duy nhất": "đặc biệt",
    "hàng đầu": "nổi bật",
    "top 1": "được ưa chuộng",
    "số một": "được yêu thích",
    "thần thánh": "cực kỳ hiệu quả",
    "thần dược": "sản phẩm hỗ trợ tốt",

    # ── Health & medical ──────────────────────────────────────────────────
    "khỏi bệnh": "cải thiện",
    "chữa trị": "hỗ trợ",
    "điều trị": "hỗ trợ",
    "bệnh": "vấn đề sức khỏe",
    "yếu sinh lý": "hỗ trợ phái mạnh",
    "tăng cân": "cải thiện cân nặng",
    "giảm cân": "quản lý vóc dáng",
    "thuốc": "sản phẩm",  # heavily regulated
    "bác sĩ": "chuyên gia",
    "phòng khám": "trung tâm chăm sóc",
    "bệnh viện": "cơ sở y tế",

    # ── Beauty & cosmetics ────────────────────────────────────────────────
    "eo thon": "vóc dáng cân đối",
    "dáng đẹp": "dáng xinh",
    "trị mụn": "hỗ trợ giảm mụn",
    "mụn": "làn da có khuyết điểm",
    "trị nám": "hỗ trợ làm mờ nám",
    "nám": "da không đều màu",
    "sẹo": "vết thâm",
    "mờ sẹo": "cải thiện vết thâm",
    "trắng da": "làm sáng da",
    "trắng bật tone": "da sáng mịn màng",
    "chống lão hóa": "hỗ trợ làn da trẻ trung",
    "xóa nhăn": "làm mờ nếp nhăn",
    "thẩm mỹ viện": "trung tâm làm đẹp",
    "dao kéo": "can thiệp thẩm mỹ",
    "phẫu thuật": "can thiệp thẩm mỹ",

    # ── Contact information ───────────────────────────────────────────────
    "liên hệ": "thông tin ở bio",
    "địa chỉ": "thông tin ở bio",
    "số điện thoại": "thông tin ở bio",
    "sđt": "thông tin ở bio",
    "zalo": "app ZL",
    "email": "thư điện tử",

    # ── Sensitive & banned content ────────────────────────────────────────
    "thuốc lá": "sản phẩm có hại",
    "rượu": "đồ uống có cồn",
    "bia": "đồ uống có cồn",
    "chất kích thích": "chất gây nghiện",
    "ma túy": "chất cấm",
    "cờ bạc": "trò chơi may rủi",
    "cá độ": "đặt cược",
    "vay tiền": "hỗ trợ tài chính",
    "tín dụng đen": "vay nặng lãi",
    "vũ khí": "vật nguy hiểm",
    "bạo lực": "hành động mạnh",
    "giết người": "hành vi nguy hiểm",
    "khiêu dâm": "nội dung nhạy cảm",
    "18+": "nội dung người lớn",
    "sexy": "quyến rũ",
    "lừa đảo": "hành vi không trung thực",
    "ăn cắp": "lấy đồ",
    "hack": "xâm nhập",
})
