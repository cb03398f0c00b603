"""
설정, 데이터 모델, 데이터 로더 유틸리티
"""
