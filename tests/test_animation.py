from gearsengine.animation import Animation, AnimationFrame, AnimationPlayer


def test_play_starts_at_start_time():
    anim = Animation(start_time=1.0, end_time=2.0)
    player = AnimationPlayer()
    player.play(anim)
    assert player.current_animation is anim
    assert player.current_time == 1.0
    assert player.is_playing()


def test_update_finishes_after_end_time():
    player = AnimationPlayer()
    player.play(Animation(start_time=1.0, end_time=2.0))
    player.update(0.5)
    assert player.is_playing()
    player.update(0.6)
    assert not player.is_playing()
    assert player.current_animation is None


def test_reaching_end_exactly_keeps_playing():
    player = AnimationPlayer()
    player.play(Animation())
    player.update(0.0)
    assert player.is_playing()


def test_stop_clears_animation():
    player = AnimationPlayer()
    player.play(Animation(end_time=10.0))
    player.stop()
    assert not player.is_playing()


def test_update_without_animation_keeps_time():
    player = AnimationPlayer()
    player.update(3.0)
    assert player.current_time == 0.0
    assert not player.is_playing()


def test_frames_are_not_shared():
    first, second = Animation(), Animation()
    first.frames.append(AnimationFrame())
    assert len(second.frames) == 0
    assert len(first.frames) == 1