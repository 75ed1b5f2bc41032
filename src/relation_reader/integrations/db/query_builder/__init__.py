"""
목적: SQL 조각 빌더 모듈 공개 API를 제공한다.
설명: 조건 빌더, 프로젝션, 신뢰된 접미 조각을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/integrations/db/query_builder/where.py
"""

from relation_reader.integrations.db.query_builder.fragment import SuffixLike, TrustedFragment, trusted
from relation_reader.integrations.db.query_builder.projection import Projection
from relation_reader.integrations.db.query_builder.where import PLACEHOLDER, Where

__all__ = ["Where", "PLACEHOLDER", "Projection", "TrustedFragment", "SuffixLike", "trusted"]
