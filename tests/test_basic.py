import pytest

from label_collision import (
    AnchorDirection,
    Label,
    LayoutConfig,
    Marker,
    Rect,
    US_STATES,
    anchor_direction_for_seed,
    build_labels,
    combined_hitbox,
    generate_markers,
    label_box,
    marker_rect,
    recompute,
    resolve_collisions,
)

CANVAS = (800, 600)


def _label(x: int, y: int, title: str = "Ohio", direction: AnchorDirection = AnchorDirection.EAST, hidden: bool = False) -> Label:
    return Label(marker=Marker(position=(x, y), dimensions=(24, 44), title=title), direction=direction, hidden=hidden)


def test_generation_is_deterministic() -> None:
    first, first_dir = generate_markers(1, CANVAS)
    second, second_dir = generate_markers(1, CANVAS)
    assert first == second
    assert first_dir is second_dir is AnchorDirection.WEST
    assert [m.position for m in first] == [m.position for m in second]


def test_generated_markers_stay_inside_canvas() -> None:
    for seed in range(1, 30):
        markers, _ = generate_markers(seed, (200, 120))
        assert len(markers) == 20
        for marker in markers:
            x, y = marker.position
            assert 0 <= x <= 200 - 24
            assert 0 <= y <= 120 - 44
            assert marker.dimensions == (24, 44)


def test_marker_as_large_as_canvas_sits_at_origin() -> None:
    markers, _ = generate_markers(5, (24, 44), count=3)
    assert all(marker.position == (0, 0) for marker in markers)


def test_titles_cycle_through_pool() -> None:
    markers, _ = generate_markers(3, CANVAS, count=55)
    assert [m.title for m in markers[:5]] == list(US_STATES[:5])
    assert markers[50].title == "Alabama"
    assert markers[54].title == US_STATES[4]

    short, _ = generate_markers(3, CANVAS, ["A", "B"], count=5)
    assert [m.title for m in short] == ["A", "B", "A", "B", "A"]


def test_different_seeds_change_layout_and_direction() -> None:
    one, one_dir = generate_markers(1, CANVAS)
    two, two_dir = generate_markers(2, CANVAS)
    assert [m.position for m in one] != [m.position for m in two]
    assert one_dir is AnchorDirection.WEST
    assert two_dir is AnchorDirection.EAST


def test_anchor_direction_follows_parity() -> None:
    assert anchor_direction_for_seed(1) is AnchorDirection.WEST
    assert anchor_direction_for_seed(2) is AnchorDirection.EAST
    assert anchor_direction_for_seed(1001) is AnchorDirection.WEST


@pytest.mark.parametrize("seed", [0, -3])
def test_generator_rejects_non_positive_seed(seed: int) -> None:
    with pytest.raises(ValueError):
        generate_markers(seed, CANVAS)


def test_generator_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        generate_markers(1, (10, 10))
    with pytest.raises(ValueError):
        generate_markers(1, CANVAS, [])
    with pytest.raises(ValueError):
        generate_markers(1, CANVAS, count=0)


def test_layout_config_validation() -> None:
    with pytest.raises(ValueError):
        LayoutConfig(canvas_size=(0, 100))
    with pytest.raises(ValueError):
        LayoutConfig(marker_count=0)
    with pytest.raises(ValueError):
        LayoutConfig(marker_dimensions=(24, -1))


def test_label_box_east_and_west() -> None:
    east = _label(100, 100)
    assert label_box(east) == Rect(124, 118, 32, 8)

    west = _label(100, 100, direction=AnchorDirection.WEST)
    assert label_box(west) == Rect(68, 118, 32, 8)


def test_combined_hitbox_visible_and_hidden() -> None:
    assert combined_hitbox(_label(100, 100)) == Rect(100, 100, 56, 44)
    assert combined_hitbox(_label(100, 100, direction=AnchorDirection.WEST)) == Rect(68, 100, 56, 44)

    for direction in AnchorDirection:
        hidden = _label(100, 100, direction=direction, hidden=True)
        assert combined_hitbox(hidden) == marker_rect(hidden.marker) == Rect(100, 100, 24, 44)


def test_rect_collision_is_strict() -> None:
    a = Rect(0, 0, 10, 10)
    assert a.collides_with(Rect(9, 9, 10, 10))
    assert not a.collides_with(Rect(10, 0, 10, 10))
    assert not a.collides_with(Rect(0, 10, 10, 10))
    assert not a.collides_with(Rect(-10, -10, 10, 10))


def test_earlier_label_wins() -> None:
    first = _label(100, 100)
    second = _label(130, 100)
    resolved = resolve_collisions([first, second])
    assert [label.hidden for label in resolved] == [False, True]
    assert all(label.resolved for label in resolved)


def test_resolution_returns_copies() -> None:
    labels = [_label(100, 100), _label(130, 100)]
    resolve_collisions(labels)
    assert [label.hidden for label in labels] == [False, False]
    assert [label.resolved for label in labels] == [False, False]


def test_touching_hitboxes_do_not_collide() -> None:
    # East hitbox of the first label ends exactly at x=156.
    resolved = resolve_collisions([_label(100, 100), _label(156, 100)])
    assert [label.hidden for label in resolved] == [False, False]

    stacked = resolve_collisions([_label(100, 100), _label(100, 144)])
    assert [label.hidden for label in stacked] == [False, False]


def test_hidden_label_only_blocks_with_its_marker() -> None:
    resolved = resolve_collisions([_label(100, 100), _label(140, 100), _label(170, 100)])
    assert [label.hidden for label in resolved] == [False, True, False]


def test_identical_hitboxes_skip_each_other() -> None:
    resolved = resolve_collisions([_label(300, 300), _label(300, 300)])
    assert [label.hidden for label in resolved] == [False, False]

    hidden = resolve_collisions([_label(300, 300, hidden=True), _label(300, 300, hidden=True)])
    assert [label.hidden for label in hidden] == [True, True]


def test_global_hide_reduces_every_hitbox_to_marker() -> None:
    for seed in (1, 2):
        labels = recompute(seed, CANVAS, hide_all=True)
        assert len(labels) == 20
        for label in labels:
            assert label.hidden
            assert combined_hitbox(label) == marker_rect(label.marker)


def test_resolution_priority_on_generated_layout() -> None:
    labels = recompute(4, CANVAS)
    for i, a in enumerate(labels):
        if a.hidden:
            continue
        for b in labels[i + 1:]:
            a_box, b_box = combined_hitbox(a), combined_hitbox(b)
            if a_box != b_box and not b.hidden:
                assert not a_box.collides_with(b_box)


def test_recompute_matches_manual_pipeline() -> None:
    markers, direction = generate_markers(9, (640, 480))
    expected = resolve_collisions(build_labels(markers, direction))
    assert recompute(9, (640, 480)) == expected
    assert recompute(9, config=LayoutConfig(canvas_size=(640, 480))) == expected


def test_recompute_is_reproducible() -> None:
    first = recompute(1, CANVAS)
    second = recompute(1, CANVAS)
    assert [combined_hitbox(label) for label in first] == [combined_hitbox(label) for label in second]
    assert first == second
