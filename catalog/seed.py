"""Seed tables for the sample catalog.

Every author of a category shares the same novel templates; chapter bodies
are placeholder text generated per chapter number.
"""

from models.enums import Category

# (id, name, avatar, bio)
AUTHOR_TABLE: dict[Category, list[tuple[str, str, str, str]]] = {
    Category.MARTIAL: [
        ("jinyong", "金庸", "person.circle.fill", "武俠小說泰斗，創作多部經典作品"),
        ("gulong", "古龍", "person.fill", "以獨特文風著稱的武俠大師"),
        ("liangyusheng", "梁羽生", "person.crop.circle", "新派武俠小說開山祖師"),
    ],
    Category.ROMANCE: [
        ("qiongyao", "瓊瑤", "heart.circle.fill", "言情小說天后，作品感人至深"),
        ("yishu", "亦舒", "heart.fill", "都會愛情小說代表作家"),
        ("xijuan", "席絹", "sparkles", "校園言情小說經典作者"),
    ],
}

# (slug, title, cover, description, rating, chapter subtitle)
NOVEL_TABLE: dict[Category, list[tuple[str, str, str, str, float, str]]] = {
    Category.MARTIAL: [
        (
            "shediao", "射鵰英雄傳", "book.closed.fill",
            "一代武俠經典，講述郭靖、黃蓉的江湖傳奇故事。從蒙古草原到中原武林，英雄豪傑輩出，俠義精神永存。",
            4.9, "風雪驚變",
        ),
        (
            "tianlong", "天龍八部", "book.fill",
            "金庸筆下最具史詩格局的武俠巨著，三位主角喬峰、段譽、虛竹各具特色，江湖恩怨糾葛不清。",
            4.8, "少年遊",
        ),
        (
            "xiaoao", "笑傲江湖", "books.vertical.fill",
            "自由與權力的對抗，令狐沖與任盈盈的愛情故事，琴簫合奏笑傲江湖。",
            4.7, "滅門",
        ),
    ],
    Category.ROMANCE: [
        (
            "huanzhu", "還珠格格", "heart.text.square.fill",
            "清朝乾隆年間，小燕子與紫薇的宮廷愛情故事，充滿歡笑與淚水。",
            4.6, "初入宮廷",
        ),
        (
            "meihua", "梅花烙", "heart.circle",
            "刻骨銘心的愛情故事，梅花烙印見證永恆的愛與痛。",
            4.5, "相遇",
        ),
        (
            "xibao", "喜寶", "star.fill",
            "現代都會女性的愛情與自我追尋，探討物質與精神的平衡。",
            4.4, "抉擇",
        ),
    ],
}

PHOTO_URL_TEMPLATE = "https://picsum.photos/id/{image_id}/{size}/{size}"

_BODY = """\
這是一個精彩的章節，充滿了戲劇性的情節發展。主角在這一章經歷了重大的轉折，命運的齒輪開始轉動。

江湖風起雲湧，英雄輩出。在這個充滿傳奇的時代，每個人都有自己的故事要訴說。

劍光劍影之間，是非恩怨難分。唯有俠義精神，永遠照亮前行的道路。

待續...

（完整內容請參閱實體書或官方電子版）

Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.

Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum."""


def chapter_title(number: int, subtitle: str) -> str:
    return f"第{number}章：{subtitle}"


def chapter_content(number: int) -> str:
    """Placeholder body for chapter ``number``."""
    return f"第 {number} 章內容\n\n{_BODY}"
