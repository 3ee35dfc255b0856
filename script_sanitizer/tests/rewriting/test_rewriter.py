"""TermRewriter correctness: text rewriting and batch traversal.

Covers:
  - empty / unmatched text passes through
  - word-boundary respect, case-insensitive matching
  - longest-match precedence and cascading sequential passes
  - metacharacters in terms and replacements
  - batch length/order, id/saved/hashtags preservation, no input mutation
  - end-to-end and batch scenarios on the default table
"""
from __future__ import annotations

import pytest

from script_sanitizer.generation.models import Script, ScriptScene
from script_sanitizer.rewriting.rewriter import TermRewriter, filter_scripts, filter_text
from script_sanitizer.rewriting.term_map import TermMap


def _make_script(**kwargs) -> Script:
    defaults: dict = {
        "id": "scr_test_001",
        "title": "Kịch bản thử",
        "hook": "Bạn đã thử chưa?",
        "scenes": [ScriptScene(visual="Cận cảnh sản phẩm", voiceover="Chất liệu mềm mại")],
        "cta": "Xem thêm nhé",
    }
    defaults.update(kwargs)
    return Script(**defaults)


# ── filter_text ───────────────────────────────────────────────────────────────


class TestPassThrough:
    def test_empty_string(self):
        assert filter_text("") == ""

    def test_none(self):
        assert filter_text(None) is None

    def test_unmatched_text_unchanged(self):
        text = "Chất liệu mềm mại, màu sắc tươi tắn."
        assert filter_text(text) == text

    def test_empty_term_map_is_identity(self):
        rw = TermRewriter(TermMap())
        assert rw.filter_text("Mua ngay trên Shopee") == "Mua ngay trên Shopee"


class TestWordBoundary:
    def test_hot_does_not_touch_hotel(self):
        rw = TermRewriter(TermMap({"hot": "nổi bật"}))
        assert rw.filter_text("hotel") == "hotel"
        assert rw.filter_text("Khách sạn hotel gần biển") == "Khách sạn hotel gần biển"

    def test_hot_replaced_as_word(self):
        rw = TermRewriter(TermMap({"hot": "nổi bật"}))
        assert rw.filter_text("Món này hot lắm") == "Món này nổi bật lắm"

    def test_default_table_leaves_top_10_alone(self):
        assert filter_text("Top 10 sản phẩm") == "Top 10 sản phẩm"

    def test_percent_term_glued_to_next_word_is_kept(self):
        assert filter_text("Đảm bảo 100%hiệu quả") == "Đảm bảo 100%hiệu quả"
        assert filter_text("Đảm bảo 100% luôn") == "hỗ trợ tối đa luôn"

    def test_all_occurrences_replaced(self):
        rw = TermRewriter(TermMap({"sale": "ưu đãi"}))
        assert rw.filter_text("sale, SALE và Sale") == "ưu đãi, ưu đãi và ưu đãi"


class TestCaseInsensitive:
    def test_upper_and_title_case_matched(self):
        assert filter_text("SHOPEE") == "sàn Cam"
        assert filter_text("TikTok") == "nền tảng này"

    def test_replacement_casing_kept(self):
        rw = TermRewriter(TermMap({"shopee": "sàn Cam"}))
        assert rw.filter_text("SHOPEE") == "sàn Cam"
        assert rw.filter_text("shopee") == "sàn Cam"

    def test_vietnamese_uppercase(self):
        assert filter_text("ĐẶT HÀNG ngay") == "đăng ký ngay"


class TestLongestMatchPrecedence:
    def test_phrase_wins_over_contained_word(self):
        rw = TermRewriter(TermMap({"rẻ": "tiết kiệm", "giá rẻ": "giá ưu đãi"}))
        assert rw.filter_text("Sản phẩm giá rẻ") == "Sản phẩm giá ưu đãi"

    def test_shorter_word_still_replaced_elsewhere(self):
        rw = TermRewriter(TermMap({"rẻ": "tiết kiệm", "giá rẻ": "giá ưu đãi"}))
        assert rw.filter_text("giá rẻ, mua rẻ") == "giá ưu đãi, mua tiết kiệm"

    def test_default_table_hospital_before_disease(self):
        assert filter_text("Đến bệnh viện") == "Đến cơ sở y tế"

    def test_default_table_tobacco_before_medicine(self):
        assert filter_text("Không hút thuốc lá") == "Không hút sản phẩm có hại"


class TestCascadingPasses:
    def test_replacement_is_rewritten_by_later_shorter_term(self):
        rw = TermRewriter(TermMap({"ab": "x c", "c": "d"}))
        assert rw.filter_text("ab") == "x d"

    def test_replacement_not_rewritten_by_earlier_longer_term(self):
        # "long term" runs before "b"; the "long term" produced by "b" survives.
        rw = TermRewriter(TermMap({"long term": "z", "b": "long term"}))
        assert rw.filter_text("b") == "long term"

    def test_default_table_flash_sale_cascade(self):
        assert filter_text("Flash sale hôm nay") == "ưu đãi chớp nhoáng hôm nay"


class TestMetacharacters:
    def test_term_with_plus(self):
        rw = TermRewriter(TermMap({"c++": "code"}))
        assert rw.filter_text("learn c++ now") == "learn code now"

    def test_dot_is_literal(self):
        rw = TermRewriter(TermMap({"a.b": "z"}))
        assert rw.filter_text("axb a.b") == "axb z"

    def test_default_18_plus(self):
        assert filter_text("nội dung 18+.") == "nội dung nội dung người lớn."

    def test_replacement_backslashes_are_literal(self):
        rw = TermRewriter(TermMap({"x": r"\1 \g<0> \n"}))
        assert rw.filter_text("x") == r"\1 \g<0> \n"

    @pytest.mark.parametrize("text", ["(", "[unclosed", "\\", "*+?", "a|b", "$^"])
    def test_never_raises_on_odd_text(self, text: str):
        assert filter_text(text) == text


class TestEndToEnd:
    def test_shopee_hook(self):
        out = filter_text("Mua ngay trên Shopee kẻo hết hàng!")
        assert out == "trải nghiệm ngay trên sàn Cam kẻo hết hàng!"
        assert out.endswith("kẻo hết hàng!")

    def test_shopee_hook_in_script(self):
        script = _make_script(hook="Mua ngay trên Shopee kẻo hết hàng!")
        [out] = filter_scripts([script])
        assert "shopee" not in out.hook.lower()
        assert "mua ngay" not in out.hook.lower()
        assert out.hook.endswith("kẻo hết hàng!")


# ── filter_scripts ────────────────────────────────────────────────────────────


class TestBatch:
    def test_empty_sequence(self):
        assert filter_scripts([]) == []

    def test_none_sequence(self):
        assert filter_scripts(None) == []

    def test_length_and_order_preserved(self):
        scripts = [_make_script(id=f"scr_{i}") for i in range(5)]
        out = filter_scripts(scripts)
        assert [s.id for s in out] == [s.id for s in scripts]

    def test_id_saved_hashtags_preserved(self):
        script = _make_script(
            id="scr_keep",
            saved=True,
            hashtags=["#shopee", "#sale"],
            cta="Mua ngay",
        )
        [out] = filter_scripts([script])
        assert out.id == "scr_keep"
        assert out.saved is True
        assert out.hashtags == ["#shopee", "#sale"]
        assert out.cta == "trải nghiệm ngay"

    def test_every_text_field_rewritten(self):
        script = _make_script(
            title="Deal",
            hook="Sale",
            cta="Like",
            post_content="Follow",
            scenes=[ScriptScene(visual="Zalo", voiceover="Email")],
        )
        [out] = filter_scripts([script])
        assert out.title == "cơ hội tốt"
        assert out.hook == "ưu đãi lớn"
        assert out.cta == "thả tim"
        assert out.post_content == "theo dõi"
        assert out.scenes[0].visual == "app ZL"
        assert out.scenes[0].voiceover == "thư điện tử"

    def test_missing_post_content_stays_missing(self):
        [out] = filter_scripts([_make_script()])
        assert out.post_content is None
        assert out.hashtags is None
        assert out.saved is None

    def test_empty_fields_pass_through(self):
        script = _make_script(title="", hook="", cta="", scenes=[ScriptScene(visual="", voiceover="")])
        [out] = filter_scripts([script])
        assert out == script

    def test_input_not_mutated(self):
        script = _make_script(hook="Mua ngay trên Shopee", scenes=[
            ScriptScene(visual="Shopee", voiceover="Lazada"),
        ])
        before = script.model_dump()
        filter_scripts([script])
        assert script.model_dump() == before

    def test_three_scripts_only_second_cta_differs(self):
        scripts = [
            _make_script(id="scr_1"),
            _make_script(id="scr_2", cta="Liên hệ Zalo để đặt hàng"),
            _make_script(id="scr_3"),
        ]
        out = filter_scripts(scripts)
        assert out[0] == scripts[0]
        assert out[2] == scripts[2]
        assert out[1].cta == "thông tin ở bio app ZL để đăng ký"
        assert out[1].model_copy(update={"cta": scripts[1].cta}) == scripts[1]

    def test_idempotent_on_clean_output(self):
        scripts = [_make_script(hook="Mua ngay trên Shopee kẻo hết hàng!")]
        once = filter_scripts(scripts)
        assert filter_scripts(once) == once


class TestInjectedTermMap:
    def test_rewriter_uses_only_its_map(self):
        rw = TermRewriter(TermMap({"kem": "sản phẩm dưỡng"}))
        [out] = rw.filter_scripts([_make_script(hook="Kem này bán trên Shopee")])
        assert out.hook == "sản phẩm dưỡng này bán trên Shopee"

    def test_term_map_exposed(self):
        tm = TermMap({"kem": "x"})
        assert TermRewriter(tm).term_map is tm
