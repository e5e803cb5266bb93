"""
k6 스크립트 / 결과 파일 입출력 유틸리티
요청마다 고유한 파일명을 사용하고, 실행이 끝나면 정리한다.
"""
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import List

import pytz

from app.core.config import settings

logger = logging.getLogger(__name__)


def generate_unique_filename(prefix: str = "test", ext: str = "js") -> str:
    """
    동시 요청에서도 겹치지 않는 파일명 생성

    Returns:
        str: 예) test_20251019_143012_123456_3f9a1c2b.js
    """
    timestamp = datetime.now(pytz.timezone(settings.TIMEZONE)).strftime("%Y%m%d_%H%M%S_%f")
    unique_id = uuid.uuid4().hex[:8]
    return f"{prefix}_{timestamp}_{unique_id}.{ext}"


class FileWriter:
    """임시 파일 저장/읽기/삭제 유틸리티"""

    @staticmethod
    def write_to_path(content: str, filename: str, base_path: str) -> Path:
        """
        base_path 아래에 파일 저장 (디렉터리가 없으면 생성)

        Raises:
            OSError: 디렉터리 생성 또는 파일 저장 실패시
        """
        target_dir = Path(base_path)
        file_path = target_dir / filename

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write file - path: {file_path}, error: {e}")
            raise

        logger.debug(f"File written: {file_path}")
        return file_path

    @staticmethod
    def ensure_directory_exists(directory_path: str) -> bool:
        """
        디렉터리가 존재하는지 확인하고, 없으면 생성

        Returns:
            bool: 디렉터리가 존재하거나 성공적으로 생성되었는지 여부
        """
        try:
            Path(directory_path).mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            logger.error(f"Failed to create directory - path: {directory_path}, error: {e}")
            return False

    @staticmethod
    def read_lines(file_path: Path) -> List[str]:
        """
        파일을 줄 단위로 읽음 (빈 줄 제외)

        Raises:
            FileNotFoundError: 파일이 없을 때
        """
        with open(file_path, "r", encoding="utf-8") as f:
            return [line for line in f if line.strip()]

    @staticmethod
    def remove_files(*file_paths: Path) -> int:
        """
        파일들을 제거. 존재하지 않는 파일은 건너뛴다.

        Returns:
            int: 실제로 제거된 파일 수
        """
        removed = 0
        for file_path in file_paths:
            try:
                Path(file_path).unlink()
                removed += 1
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning(f"Failed to remove file - path: {file_path}, error: {e}")
        return removed
