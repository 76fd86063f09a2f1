from chapter_splitter.naming import normalize_title, sanitize_filename, segment_filename


def test_normalize_title_strips_bom_and_full_width_spaces():
    assert normalize_title("\ufeff第1章\u3000はじめに ") == "第1章 はじめに"
    assert normalize_title(None) == ""


def test_sanitize_filename():
    assert sanitize_filename('a/b:c*d?e"f<g>h|i') == "a_b_c_d_e_f_g_h_i"
    assert sanitize_filename("Plain Title") == "Plain Title"


def test_segment_filename():
    assert segment_filename(1, "Chapter 1: Introduction") == "01_Chapter 1_ Introduction.pdf"
    assert segment_filename(12, "Sec 2.1", "Chapter 2") == "12_Chapter 2_Sec 2.1.pdf"
    assert segment_filename(99, "Appendix") == "99_Appendix.pdf"
