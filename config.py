import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
STATIC_DIR = os.path.join(BASE_DIR, "static")
LOG_FILE = os.path.join(BASE_DIR, "launch.log")

# 서버 설정
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))
DEFAULT_TIMEOUT = 15.0

# 퀴즈 설정
QUIZ_TITLE = "JUPEB QUESTIONS MINI QUIZ"
QUIZ_DURATION_SECONDS = int(os.getenv("QUIZ_DURATION_SECONDS", "1800"))  # 30분
TICK_INTERVAL_SECONDS = 1.0
TIME_WARNING_SECONDS = 60   # 1분 미만이면 경고 표시

# 문제은행 JSON 파일 (없으면 내장 문제 사용)
QUIZ_QUESTIONS_FILE = os.getenv("QUIZ_QUESTIONS_FILE", "")
