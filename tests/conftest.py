"""
Shared fixtures for musubi tests.

Morphemes are written as MeCab/IPADIC would print them, so every test
goes through the real feature parser.
"""

import pytest

from musubi.features import RawMorpheme, parse_tokens


# IPADIC analyses used across the test suite
IPADIC = {
    # nouns
    "子ども": "名詞,一般,*,*,*,*,子ども,コドモ,コドモ",
    "本": "名詞,一般,*,*,*,*,本,ホン,ホン",
    "部屋": "名詞,一般,*,*,*,*,部屋,ヘヤ,ヘヤ",
    "日本": "名詞,固有名詞,地域,国,*,*,日本,ニッポン,ニッポン",
    "田中": "名詞,固有名詞,人名,姓,*,*,田中,タナカ,タナカ",
    "私": "名詞,代名詞,一般,*,*,*,私,ワタシ,ワタシ",
    "勉強": "名詞,サ変接続,*,*,*,*,勉強,ベンキョウ,ベンキョー",
    "静か": "名詞,形容動詞語幹,*,*,*,*,静か,シズカ,シズカ",
    "大切": "名詞,形容動詞語幹,*,*,*,*,大切,タイセツ,タイセツ",
    "だらし": "名詞,ナイ形容詞語幹,*,*,*,*,だらし,ダラシ,ダラシ",
    "今日": "名詞,副詞可能,*,*,*,*,今日,キョウ,キョー",
    "ため": "名詞,非自立,副詞可能,*,*,*,ため,タメ,タメ",
    "よう": "名詞,非自立,助動詞語幹,*,*,*,よう,ヨウ,ヨー",
    "そう": "名詞,特殊,助動詞語幹,*,*,*,そう,ソウ,ソー",
    "みたい": "名詞,非自立,形容動詞語幹,*,*,*,みたい,ミタイ,ミタイ",
    "こと": "名詞,非自立,一般,*,*,*,こと,コト,コト",
    "三": "名詞,数,*,*,*,*,三,サン,サン",
    "千": "名詞,数,*,*,*,*,千,セン,セン",
    "人": "名詞,接尾,助数詞,*,*,*,人,ニン,ニン",
    "たち": "名詞,接尾,一般,*,*,*,たち,タチ,タチ",
    "さん": "名詞,接尾,人名,*,*,*,さん,サン,サン",
    "さ": "名詞,接尾,特殊,*,*,*,さ,サ,サ",
    "対": "名詞,接続詞的,*,*,*,*,対,タイ,タイ",
    "ごらん": "名詞,動詞非自立的,*,*,*,*,ごらん,ゴラン,ゴラン",
    # verbs
    "食べ": "動詞,自立,*,*,一段,連用形,食べる,タベ,タベ",
    "読ん": "動詞,自立,*,*,五段・マ行,連用タ接続,読む,ヨン,ヨン",
    "し": "動詞,自立,*,*,サ変・スル,連用形,する,シ,シ",
    "する": "動詞,自立,*,*,サ変・スル,基本形,する,スル,スル",
    "い": "動詞,非自立,*,*,一段,連用形,いる,イ,イ",
    "くれ": "動詞,非自立,*,*,一段・クレル,命令ｉ,くれる,クレ,クレ",
    "られる": "動詞,接尾,*,*,一段,基本形,られる,ラレル,ラレル",
    # adjectives
    "高い": "形容詞,自立,*,*,形容詞・アウオ段,基本形,高い,タカイ,タカイ",
    "高": "形容詞,自立,*,*,形容詞・アウオ段,ガル接続,高い,タカ,タカ",
    # auxiliaries
    "た": "助動詞,*,*,*,特殊・タ,基本形,た,タ,タ",
    "まし": "助動詞,*,*,*,特殊・マス,連用形,ます,マシ,マシ",
    "ませ": "助動詞,*,*,*,特殊・マス,未然形,ます,マセ,マセ",
    "ない": "助動詞,*,*,*,特殊・ナイ,基本形,ない,ナイ,ナイ",
    "たい": "助動詞,*,*,*,特殊・タイ,基本形,たい,タイ,タイ",
    "ぬ": "助動詞,*,*,*,特殊・ヌ,基本形,ぬ,ヌ,ヌ",
    "ん": "助動詞,*,*,*,不変化型,基本形,ん,ン,ン",
    "だ": "助動詞,*,*,*,特殊・ダ,基本形,だ,ダ,ダ",
    "な": "助動詞,*,*,*,特殊・ダ,体言接続,だ,ナ,ナ",
    "です": "助動詞,*,*,*,特殊・デス,基本形,です,デス,デス",
    "らしい": "助動詞,*,*,*,形容詞・イ段,基本形,らしい,ラシイ,ラシイ",
    # particles
    "が": "助詞,格助詞,一般,*,*,*,が,ガ,ガ",
    "を": "助詞,格助詞,一般,*,*,*,を,ヲ,ヲ",
    "は": "助詞,係助詞,*,*,*,*,は,ハ,ワ",
    "の": "助詞,連体化,*,*,*,*,の,ノ,ノ",
    "に": "助詞,格助詞,一般,*,*,*,に,ニ,ニ",
    "に(副詞化)": "助詞,副詞化,*,*,*,*,に,ニ,ニ",
    "て": "助詞,接続助詞,*,*,*,*,て,テ,テ",
    "で": "助詞,接続助詞,*,*,*,*,で,デ,デ",
    "ば": "助詞,接続助詞,*,*,*,*,ば,バ,バ",
    "から": "助詞,接続助詞,*,*,*,*,から,カラ,カラ",
    # everything else
    "お": "接頭詞,名詞接続,*,*,*,*,お,オ,オ",
    "この": "連体詞,*,*,*,*,*,この,コノ,コノ",
    "しかし": "接続詞,*,*,*,*,*,しかし,シカシ,シカシ",
    "とても": "副詞,助詞類接続,*,*,*,*,とても,トテモ,トテモ",
    "。": "記号,句点,*,*,*,*,。,。,。",
    "えーと": "フィラー,*,*,*,*,*,えーと,エート,エート",
    "ああ": "感動詞,*,*,*,*,*,ああ,アア,アー",
    "よ": "その他,間投,*,*,*,*,よ,ヨ,ヨ",
}


def raw(name: str) -> RawMorpheme:
    """Build a RawMorpheme from an IPADIC entry; '(...)' disambiguators are stripped."""
    surface = name.split("(")[0]
    return RawMorpheme(surface, IPADIC[name])


@pytest.fixture
def make_raw():
    """Build raw morphemes from IPADIC entry names."""
    def _make(*names):
        return [raw(name) for name in names]
    return _make


@pytest.fixture
def make_tokens():
    """Build parsed tokens from IPADIC entry names."""
    def _make(*names):
        return parse_tokens([raw(name) for name in names])
    return _make


@pytest.fixture
def sentence_names():
    """子どもたちが本を読んでいました。"""
    return ["子ども", "たち", "が", "本", "を", "読ん", "で", "い", "まし", "た", "。"]
