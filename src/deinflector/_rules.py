"""Built-in deinflection rules, generated once from the conjugation rows."""

from __future__ import annotations

from ._types import Reason, Rule, WordClass

_INIT = WordClass.INITIAL
_V1 = WordClass.ICHIDAN_VERB
_V5 = WordClass.GODAN_VERB
_ADJ = WordClass.I_ADJ
_VK = WordClass.KURU_VERB
_VS = WordClass.SURU_VERB

# Endings that conjugate further as an i-adjective (ない, たい) or as an
# ichidan/godan verb (させる, ている, ちゃう) accept the reduced form of
# that class as well as the surface form.
_INIT_ADJ = _INIT | _ADJ
_INIT_V1 = _INIT | _V1
_INIT_V5 = _INIT | _V5

# Godan dictionary ending -> (a, i, e, o) row kana.
GODAN_ROWS: dict[str, tuple[str, str, str, str]] = {
    "う": ("わ", "い", "え", "お"),
    "く": ("か", "き", "け", "こ"),
    "ぐ": ("が", "ぎ", "げ", "ご"),
    "す": ("さ", "し", "せ", "そ"),
    "つ": ("た", "ち", "て", "と"),
    "ぬ": ("な", "に", "ね", "の"),
    "ぶ": ("ば", "び", "べ", "ぼ"),
    "む": ("ま", "み", "め", "も"),
    "る": ("ら", "り", "れ", "ろ"),
}

# Godan ending -> (onbin stem, voices the following た/て).
GODAN_ONBIN: dict[str, tuple[str, bool]] = {
    "う": ("っ", False),
    "く": ("い", False),
    "ぐ": ("い", True),
    "す": ("し", False),
    "つ": ("っ", False),
    "ぬ": ("ん", True),
    "ぶ": ("ん", True),
    "む": ("ん", True),
    "る": ("っ", False),
}

# 来る negative-stem spellings, kana and kanji.
_KURU_IRREALIS = (("こ", "くる"), ("来", "来る"))

_rules: list[Rule] = []


def _add(
    from_suffix: str,
    to_suffix: str,
    from_classes: WordClass,
    to_classes: WordClass,
    reason: Reason,
) -> None:
    _rules.append(
        Rule(from_suffix, to_suffix, from_classes, to_classes, reason)
    )


def _continuative(
    ending: str, reason: Reason, from_classes: WordClass = _INIT
) -> None:
    """Endings on the masu stem: 食べ-ます, 書き-ます, き-ます, し-ます."""
    _add(ending, "る", from_classes, _V1, reason)
    for dict_end, row in GODAN_ROWS.items():
        _add(row[1] + ending, dict_end, from_classes, _V5, reason)
    _add("き" + ending, "くる", from_classes, _VK, reason)
    _add("来" + ending, "来る", from_classes, _VK, reason)
    _add("し" + ending, "する", from_classes, _VS, reason)


def _te_stem(
    plain: str, voiced: str, reason: Reason, from_classes: WordClass = _INIT
) -> None:
    """Endings on the te/ta stem, including godan sound changes."""
    _add(plain, "る", from_classes, _V1, reason)
    for dict_end, (onbin, voicing) in GODAN_ONBIN.items():
        ending = voiced if voicing else plain
        _add(onbin + ending, dict_end, from_classes, _V5, reason)
    # 行く takes っ instead of い
    _add("いっ" + plain, "いく", from_classes, _V5, reason)
    _add("行っ" + plain, "行く", from_classes, _V5, reason)
    _add("き" + plain, "くる", from_classes, _VK, reason)
    _add("来" + plain, "来る", from_classes, _VK, reason)
    _add("し" + plain, "する", from_classes, _VS, reason)


def _irrealis(
    ending: str,
    reason: Reason,
    from_classes: WordClass = _INIT,
    *,
    suru: str,
) -> None:
    """Endings on the negative stem (書か-ない, こ-ない, し-ない)."""
    _add(ending, "る", from_classes, _V1, reason)
    for dict_end, row in GODAN_ROWS.items():
        _add(row[0] + ending, dict_end, from_classes, _V5, reason)
    for stem, dict_form in _KURU_IRREALIS:
        _add(stem + ending, dict_form, from_classes, _VK, reason)
    _add(suru, "する", from_classes, _VS, reason)


# -- Polite ます family --

_continuative("ます", Reason.POLITE)
_continuative("ました", Reason.POLITE_PAST)
_continuative("ません", Reason.POLITE_NEGATIVE)
_continuative("ませんでした", Reason.POLITE_PAST_NEGATIVE)
_continuative("ましょう", Reason.POLITE_VOLITIONAL)
_add("くありません", "い", _INIT, _ADJ, Reason.POLITE_NEGATIVE)
_add("くありませんでした", "い", _INIT, _ADJ, Reason.POLITE_PAST_NEGATIVE)

# -- Other masu-stem auxiliaries --

_continuative("たい", Reason.TAI, _INIT_ADJ)
_continuative("なさい", Reason.NASAI)
_continuative("すぎる", Reason.SUGIRU, _INIT_V1)
_continuative("そう", Reason.SOU)
_add("すぎる", "い", _INIT_V1, _ADJ, Reason.SUGIRU)
_add("そう", "い", _INIT, _ADJ, Reason.SOU)

# -- Te/ta stem --

_te_stem("た", "だ", Reason.PAST)
_te_stem("て", "で", Reason.TE)
_te_stem("たら", "だら", Reason.TARA)
_te_stem("たり", "だり", Reason.TARI)
_te_stem("ている", "でいる", Reason.CONTINUOUS, _INIT_V1)
_te_stem("てる", "でる", Reason.CONTINUOUS, _INIT_V1)
_te_stem("ちゃう", "じゃう", Reason.CHAU, _INIT_V5)
_te_stem("とく", "どく", Reason.TOKU, _INIT_V5)
_add("かった", "い", _INIT_ADJ, _ADJ, Reason.PAST)
_add("くて", "い", _INIT_ADJ, _ADJ, Reason.TE)
_add("かったら", "い", _INIT_ADJ, _ADJ, Reason.TARA)
_add("かったり", "い", _INIT_ADJ, _ADJ, Reason.TARI)

# -- Negative stem --

_irrealis("ない", Reason.NEGATIVE, _INIT_ADJ, suru="しない")
_irrealis("ず", Reason.ZU, suru="せず")
_add("くない", "い", _INIT_ADJ, _ADJ, Reason.NEGATIVE)

for _dict_end, _row in GODAN_ROWS.items():
    _add(_row[0] + "れる", _dict_end, _INIT_V1, _V5, Reason.PASSIVE)
    _add(_row[0] + "せる", _dict_end, _INIT_V1, _V5, Reason.CAUSATIVE)
    _add(
        _row[0] + "される", _dict_end, _INIT_V1, _V5,
        Reason.CAUSATIVE_PASSIVE,
    )
_add("られる", "る", _INIT_V1, _V1, Reason.POTENTIAL_OR_PASSIVE)
_add("させる", "る", _INIT_V1, _V1, Reason.CAUSATIVE)
_add("させられる", "る", _INIT_V1, _V1, Reason.CAUSATIVE_PASSIVE)
for _stem, _dict_form in _KURU_IRREALIS:
    _add(
        _stem + "られる", _dict_form, _INIT_V1, _VK,
        Reason.POTENTIAL_OR_PASSIVE,
    )
    _add(_stem + "させる", _dict_form, _INIT_V1, _VK, Reason.CAUSATIVE)
    _add(
        _stem + "させられる", _dict_form, _INIT_V1, _VK,
        Reason.CAUSATIVE_PASSIVE,
    )
_add("される", "する", _INIT_V1, _VS, Reason.PASSIVE)
_add("させる", "する", _INIT_V1, _VS, Reason.CAUSATIVE)
_add("させられる", "する", _INIT_V1, _VS, Reason.CAUSATIVE_PASSIVE)

# -- Hypothetical/imperative (e) stem --

for _dict_end, _row in GODAN_ROWS.items():
    _add(_row[2] + "る", _dict_end, _INIT_V1, _V5, Reason.POTENTIAL)
    _add(_row[2] + "ば", _dict_end, _INIT, _V5, Reason.BA)
    _add(_row[2], _dict_end, _INIT, _V5, Reason.IMPERATIVE)
# ら抜き potential: 見れる, これる
_add("れる", "る", _INIT_V1, _V1, Reason.POTENTIAL)
_add("これる", "くる", _INIT_V1, _VK, Reason.POTENTIAL)
_add("来れる", "来る", _INIT_V1, _VK, Reason.POTENTIAL)
_add("できる", "する", _INIT_V1, _VS, Reason.POTENTIAL)

_add("れば", "る", _INIT, _V1, Reason.BA)
_add("くれば", "くる", _INIT, _VK, Reason.BA)
_add("来れば", "来る", _INIT, _VK, Reason.BA)
_add("すれば", "する", _INIT, _VS, Reason.BA)
_add("ければ", "い", _INIT_ADJ, _ADJ, Reason.BA)

_add("ろ", "る", _INIT, _V1, Reason.IMPERATIVE)
_add("よ", "る", _INIT, _V1, Reason.IMPERATIVE)
_add("こい", "くる", _INIT, _VK, Reason.IMPERATIVE)
_add("来い", "来る", _INIT, _VK, Reason.IMPERATIVE)
_add("しろ", "する", _INIT, _VS, Reason.IMPERATIVE)
_add("せよ", "する", _INIT, _VS, Reason.IMPERATIVE)

# -- Volitional (o) stem --

for _dict_end, _row in GODAN_ROWS.items():
    _add(_row[3] + "う", _dict_end, _INIT, _V5, Reason.VOLITIONAL)
_add("よう", "る", _INIT, _V1, Reason.VOLITIONAL)
_add("こよう", "くる", _INIT, _VK, Reason.VOLITIONAL)
_add("来よう", "来る", _INIT, _VK, Reason.VOLITIONAL)
_add("しよう", "する", _INIT, _VS, Reason.VOLITIONAL)
_add("かろう", "い", _INIT, _ADJ, Reason.VOLITIONAL)

# -- Prohibitive な on the dictionary form --

for _dict_end in GODAN_ROWS:
    _add(_dict_end + "な", _dict_end, _INIT, _V5, Reason.IMPERATIVE_NEGATIVE)
_add("るな", "る", _INIT, _V1, Reason.IMPERATIVE_NEGATIVE)
_add("くるな", "くる", _INIT, _VK, Reason.IMPERATIVE_NEGATIVE)
_add("来るな", "来る", _INIT, _VK, Reason.IMPERATIVE_NEGATIVE)
_add("するな", "する", _INIT, _VS, Reason.IMPERATIVE_NEGATIVE)

# -- Adjective adverb and noun forms --

_add("く", "い", _INIT, _ADJ, Reason.ADV)
_add("さ", "い", _INIT, _ADJ, Reason.NOUN)

RULES: tuple[Rule, ...] = tuple(_rules)
