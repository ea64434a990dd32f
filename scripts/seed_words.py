"""Built-in Japanese/English word list, by level and series.

Run `python -m scripts.seed_words [path]` to write it as words.json.
"""

import json
import sys

VERB_SERIES = '動詞'

# level -> {series: [(en, ja), ...]}
SERIES_WORDS = {
    1: {
        '動物': [
            ('dog', '犬'), ('cat', '猫'), ('bird', '鳥'), ('fish', '魚'),
            ('horse', '馬'), ('cow', '牛'), ('pig', '豚'), ('rabbit', 'うさぎ'),
            ('bear', '熊'), ('monkey', '猿')
        ],
        '食べ物': [
            ('bread', 'パン'), ('milk', '牛乳'), ('water', '水'), ('rice', 'ご飯'),
            ('egg', '卵'), ('apple', 'りんご'), ('banana', 'バナナ'), ('meat', '肉'),
            ('cheese', 'チーズ'), ('orange', 'オレンジ')
        ],
        '色': [
            ('red', '赤'), ('blue', '青'), ('green', '緑'), ('yellow', '黄色'),
            ('black', '黒'), ('white', '白'), ('brown', '茶色'), ('pink', 'ピンク')
        ],
        '家族': [
            ('mother', '母'), ('father', '父'), ('brother', '兄弟'), ('sister', '姉妹')
        ]
    },
    2: {
        '天気': [
            ('sunny', '晴れた'), ('rainy', '雨の'), ('cloudy', '曇った'), ('snow', '雪'),
            ('wind', '風'), ('storm', '嵐'), ('thunder', '雷'), ('temperature', '気温')
        ],
        '職業': [
            ('teacher', '教師'), ('doctor', '医者'), ('nurse', '看護師'), ('farmer', '農家'),
            ('police officer', '警察官'), ('cook', '料理人'), ('pilot', 'パイロット'),
            ('scientist', '科学者'), ('artist', '芸術家')
        ],
        '学校': [
            ('subject', '教科'), ('homework', '宿題'), ('library', '図書館'),
            ('classroom', '教室'), ('exam', '試験'), ('dictionary', '辞書'),
            ('uniform', '制服'), ('club activity', '部活動')
        ]
    },
    3: {
        '感情': [
            ('anxiety', '不安'), ('confidence', '自信'), ('curiosity', '好奇心'),
            ('envy', '嫉妬'), ('gratitude', '感謝'), ('regret', '後悔'),
            ('relief', '安心'), ('pride', '誇り')
        ],
        '社会': [
            ('economy', '経済'), ('government', '政府'), ('election', '選挙'),
            ('population', '人口'), ('environment', '環境'), ('industry', '産業'),
            ('tradition', '伝統'), ('citizen', '市民'), ('policy', '政策')
        ],
        '抽象': [
            ('opportunity', '機会'), ('responsibility', '責任'), ('experience', '経験'),
            ('knowledge', '知識'), ('influence', '影響'), ('purpose', '目的'),
            ('evidence', '証拠'), ('solution', '解決策')
        ]
    }
}

# level -> [(en, ja, base, past, pp), ...]
VERB_WORDS = {
    1: [
        ('go', '行く', 'go', 'went', 'gone'),
        ('come', '来る', 'come', 'came', 'come'),
        ('eat', '食べる', 'eat', 'ate', 'eaten'),
        ('drink', '飲む', 'drink', 'drank', 'drunk'),
        ('see', '見る', 'see', 'saw', 'seen'),
        ('make', '作る', 'make', 'made', 'made'),
        ('have', '持っている', 'have', 'had', 'had'),
        ('get', '手に入れる', 'get', 'got', 'got'),
        ('read', '読む', 'read', 'read', 'read'),
        ('write', '書く', 'write', 'wrote', 'written'),
        ('run', '走る', 'run', 'ran', 'run'),
        ('play', '遊ぶ', 'play', 'played', 'played')
    ],
    2: [
        ('begin', '始める', 'begin', 'began', 'begun'),
        ('buy', '買う', 'buy', 'bought', 'bought'),
        ('bring', '持ってくる', 'bring', 'brought', 'brought'),
        ('choose', '選ぶ', 'choose', 'chose', 'chosen'),
        ('forget', '忘れる', 'forget', 'forgot', 'forgotten'),
        ('leave', '去る', 'leave', 'left', 'left'),
        ('lose', '失う', 'lose', 'lost', 'lost'),
        ('speak', '話す', 'speak', 'spoke', 'spoken'),
        ('teach', '教える', 'teach', 'taught', 'taught'),
        ('think', '思う', 'think', 'thought', 'thought'),
        ('understand', '理解する', 'understand', 'understood', 'understood'),
        ('wear', '着ている', 'wear', 'wore', 'worn')
    ],
    3: [
        ('arise', '生じる', 'arise', 'arose', 'arisen'),
        ('bear', '耐える', 'bear', 'bore', 'borne'),
        ('bind', '縛る', 'bind', 'bound', 'bound'),
        ('forbid', '禁じる', 'forbid', 'forbade', 'forbidden'),
        ('forgive', '許す', 'forgive', 'forgave', 'forgiven'),
        ('overcome', '克服する', 'overcome', 'overcame', 'overcome'),
        ('seek', '探し求める', 'seek', 'sought', 'sought'),
        ('strike', '打つ', 'strike', 'struck', 'struck'),
        ('swear', '誓う', 'swear', 'swore', 'sworn'),
        ('undertake', '引き受ける', 'undertake', 'undertook', 'undertaken'),
        ('withdraw', '撤回する', 'withdraw', 'withdrew', 'withdrawn'),
        ('weave', '織る', 'weave', 'wove', 'woven')
    ]
}


def get_seed_words() -> list[dict]:
    """Word records in words.json format.

    Returns list of {en, ja, level, series[, forms: {base, past, pp}]} dicts.
    """
    words = []
    for level, series_map in SERIES_WORDS.items():
        for series, pairs in series_map.items():
            for en, ja in pairs:
                words.append({'en': en, 'ja': ja, 'level': level, 'series': series})
    for level, verbs in VERB_WORDS.items():
        for en, ja, base, past, pp in verbs:
            words.append({
                'en': en,
                'ja': ja,
                'level': level,
                'series': VERB_SERIES,
                'forms': {'base': base, 'past': past, 'pp': pp}
            })
    return words


def main(argv: list[str] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else 'words.json'
    words = get_seed_words()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(words, f, indent=2, ensure_ascii=False)
    print(f"Wrote {len(words)} words to {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
