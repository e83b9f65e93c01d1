"""
스티커 카탈로그 시드 스크립트
판매할 기본 스티커를 stickers 테이블에 적재 (이미 있는 이름은 건너뜀)
"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from souldiary.config import Settings
from souldiary.database.connection import create_db_engine, create_session_factory
from souldiary.database.session import get_db_context
from souldiary.models.sticker import Sticker

DEFAULT_STICKERS = [
    # (이름, 가격, 이미지)
    ("Heart", 1000, "/stickers/heart.png"),
    ("Star", 1000, "/stickers/star.png"),
    ("Sun", 1500, "/stickers/sun.png"),
    ("Rain", 1500, "/stickers/rain.png"),
    ("Clover", 2000, "/stickers/clover.png"),
    ("Cat", 3000, "/stickers/cat.png"),
    ("Rainbow", 3000, "/stickers/rainbow.png"),
]


def seed_stickers(session_factory) -> int:
    """기본 스티커 시드 - 새로 추가한 개수 반환"""
    added = 0
    with get_db_context(session_factory) as db:
        existing = {name for (name,) in db.query(Sticker.name).all()}
        for name, price, image in DEFAULT_STICKERS:
            if name in existing:
                continue
            db.add(Sticker(name=name, price=price, image=image))
            added += 1
    return added


def main():
    load_dotenv()
    engine = create_db_engine(Settings())
    try:
        added = seed_stickers(create_session_factory(engine))
        print(f"✅ 스티커 시드 완료: {added}개 추가 (전체 {len(DEFAULT_STICKERS)}개)")
    except Exception as e:
        print(f"❌ 스티커 시드 실패: {str(e)}")
        raise
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
