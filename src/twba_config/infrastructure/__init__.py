"""
Infrastructure Layer

외부 의존성 구현 (환경변수, JSON 파일, 로깅)
"""
