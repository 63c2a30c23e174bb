from retrolaunch.animation import AnimationFrame, DelayAnimation
from retrolaunch.geometry import Vector2

FRAMES = [Vector2(798, 1017), Vector2(834, 1017), Vector2(870, 1017)]


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_animation(duration=0.1):
    clock = FakeClock()
    anim = AnimationFrame(delay=DelayAnimation(duration=duration, clock=clock))
    anim.add_animation("frame", FRAMES)
    anim.change_animation("frame")
    return anim, clock


def test_delay_start_only_once():
    clock = FakeClock()
    delay = DelayAnimation(duration=1.0, clock=clock)
    delay.start()
    clock.now = 0.5
    delay.start()
    assert not delay.is_time_elapsed()
    clock.now = 1.0
    assert delay.is_time_elapsed()


def test_delay_reset_restarts_timer():
    clock = FakeClock()
    delay = DelayAnimation(duration=1.0, clock=clock)
    delay.start()
    clock.now = 5.0
    delay.reset()
    delay.start()
    assert not delay.is_time_elapsed()
    assert delay.started


def test_get_animations_missing_is_empty():
    anim = AnimationFrame()
    assert anim.get_animations("missing") == []


def test_get_animations_returns_frames():
    anim, _ = make_animation()
    assert anim.get_animations("frame") == FRAMES


def test_current_frame_without_frames_is_origin():
    anim = AnimationFrame()
    assert anim.current_frame() == Vector2()


def test_change_frame_wraps():
    anim, _ = make_animation()
    seen = []
    for _ in range(len(FRAMES) + 1):
        seen.append(anim.current_frame())
        anim.change_frame()
    assert seen == FRAMES + FRAMES[:1]


def test_update_animation_waits_for_delay():
    anim, clock = make_animation(duration=0.1)
    anim.update_animation()
    assert anim.frame == 0
    clock.now = 0.1
    anim.update_animation()
    assert anim.current_frame() == FRAMES[1]
    anim.update_animation()
    assert anim.frame == 1


def test_change_animation_resets_frame_only_on_switch():
    anim, _ = make_animation()
    anim.change_frame()
    anim.change_animation("frame")
    assert anim.frame == 1
    anim.add_animation("other", FRAMES[::-1])
    anim.change_animation("other")
    assert anim.frame == 0
    assert anim.current_frame() == FRAMES[-1]