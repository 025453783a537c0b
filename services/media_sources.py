# services/media_sources.py
"""
Korean media outlets grouped by editorial lean.

Add or edit outlets here. Each entry's domain is also sent to the model
provider as a search domain filter.
"""
from typing import List

from schemas.news_analysis import MediaBias, MediaSource


PROGRESSIVE_MEDIA: List[MediaSource] = [
    MediaSource(name="한겨레", bias=MediaBias.PROGRESSIVE, domain="hani.co.kr"),
    MediaSource(name="경향신문", bias=MediaBias.PROGRESSIVE, domain="khan.co.kr"),
    MediaSource(name="오마이뉴스", bias=MediaBias.PROGRESSIVE, domain="ohmynews.com"),
    MediaSource(name="프레시안", bias=MediaBias.PROGRESSIVE, domain="pressian.com"),
    MediaSource(name="JTBC", bias=MediaBias.PROGRESSIVE, domain="jtbc.co.kr"),
    MediaSource(name="뉴스타파", bias=MediaBias.PROGRESSIVE, domain="newstapa.org"),
    MediaSource(name="미디어오늘", bias=MediaBias.PROGRESSIVE, domain="mediatoday.co.kr"),
]

CONSERVATIVE_MEDIA: List[MediaSource] = [
    MediaSource(name="조선일보", bias=MediaBias.CONSERVATIVE, domain="chosun.com"),
    MediaSource(name="중앙일보", bias=MediaBias.CONSERVATIVE, domain="joongang.co.kr"),
    MediaSource(name="동아일보", bias=MediaBias.CONSERVATIVE, domain="donga.com"),
    MediaSource(name="문화일보", bias=MediaBias.CONSERVATIVE, domain="munhwa.com"),
    MediaSource(name="TV조선", bias=MediaBias.CONSERVATIVE, domain="tvchosun.com"),
    MediaSource(name="채널A", bias=MediaBias.CONSERVATIVE, domain="ichannela.com"),
    MediaSource(name="매일경제", bias=MediaBias.CONSERVATIVE, domain="mk.co.kr"),
    MediaSource(name="한국경제", bias=MediaBias.CONSERVATIVE, domain="hankyung.com"),
]

# Korean labels used in prompts and fallback messages
BIAS_LABELS = {
    MediaBias.PROGRESSIVE: "진보",
    MediaBias.CONSERVATIVE: "보수",
}


def get_bias_label(bias: MediaBias) -> str:
    return BIAS_LABELS[MediaBias(bias)]


def get_media_sources_by_bias(bias: MediaBias) -> List[MediaSource]:
    if MediaBias(bias) is MediaBias.PROGRESSIVE:
        return list(PROGRESSIVE_MEDIA)
    return list(CONSERVATIVE_MEDIA)


def get_media_names_by_bias(bias: MediaBias) -> List[str]:
    return [source.name for source in get_media_sources_by_bias(bias)]


def get_domains_by_bias(bias: MediaBias) -> List[str]:
    """Domain allow-list for the model provider's search filter."""
    return [source.domain for source in get_media_sources_by_bias(bias) if source.domain]

