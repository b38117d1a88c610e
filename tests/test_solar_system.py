import math

import pytest

from labkit.solar_system import Body, SolarSystem, main


def by_name(system, name):
    return next(body for body in system.bodies if body.name == name)


def distance(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


def test_default_screen_size():
    system = SolarSystem()
    assert (system.width, system.height) == (3300, 1800)


def test_sun_sits_at_centre():
    system = SolarSystem(400, 200)
    assert system.positions()["sun"] == (system.width / 2, system.height / 2)


def test_planets_lie_on_their_orbits():
    system = SolarSystem()
    positions = system.positions()
    for body in system.bodies:
        if body.parent is None and body.name != "sun":
            assert distance(positions[body.name], positions["sun"]) == pytest.approx(body.orbit)


def test_moon_orbits_earth():
    system = SolarSystem()
    system.advance()
    positions = system.positions()
    moon = by_name(system, "moon")
    assert moon.parent == "earth"
    assert distance(positions["moon"], positions["earth"]) == pytest.approx(moon.orbit)


def test_zoom_scales_distances():
    system = SolarSystem()
    before = system.positions()
    system.apply_scroll(5)
    after = system.positions()
    ratio = distance(after["mars"], after["sun"]) / distance(before["mars"], before["sun"])
    assert ratio == pytest.approx(system.zoom)


def test_zoom_is_clamped():
    system = SolarSystem()
    assert system.apply_scroll(1000) == 5.0
    assert system.apply_scroll(-1000) == 0.1


def test_advance_turns_by_step():
    system = SolarSystem()
    before = {body.name: body.angle for body in system.bodies}
    system.advance()
    for body in system.bodies:
        assert body.angle == pytest.approx(before[body.name] + body.step)


def test_advance_moves_planets_along_orbit():
    system = SolarSystem()
    start = system.positions()["venus"]
    system.advance()
    moved = system.positions()["venus"]
    assert moved != start
    sun = system.positions()["sun"]
    assert distance(moved, sun) == pytest.approx(distance(start, sun))


def test_update_counts_frames_unless_paused():
    system = SolarSystem()
    system.update()
    system.update()
    assert system.frames_counter == 2
    system.toggle_pause()
    system.update()
    assert system.frames_counter == 2
    system.toggle_pause()
    system.update()
    assert system.frames_counter == 3


def test_pause_ignored_when_over():
    system = SolarSystem()
    system.game_over = True
    system.toggle_pause()
    assert system.paused is False


def test_reset_clears_state():
    system = SolarSystem()
    system.update()
    system.toggle_pause()
    system.game_over = True
    system.reset()
    assert (system.frames_counter, system.paused, system.game_over) == (0, False, False)


def test_custom_body_position():
    body = Body("probe", 10.0, 1, "white", angle=90.0)
    system = SolarSystem(0, 0)
    system.bodies = [body]
    x, y = system.positions()["probe"]
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(body.orbit)


def test_main_prints_every_body(capsys):
    assert main(["--frames", "2"]) == 0
    out = capsys.readouterr().out
    names = [line.split(":")[0] for line in out.splitlines()]
    assert names == [body.name for body in SolarSystem().bodies]