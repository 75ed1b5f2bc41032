"""
목적: 외부 시스템 통합 패키지를 정의한다.
설명: DB 통합 모듈을 하위 패키지로 둔다.
디자인 패턴: 패키지 경계
참조: src/relation_reader/integrations/db
"""
