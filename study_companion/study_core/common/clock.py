import time


def epoch_millis() -> int:
    """
    @returns 현재 시각의 epoch 밀리초 (시드 미지정 시 엔트로피로 사용).
    """
    return int(time.time() * 1000)
