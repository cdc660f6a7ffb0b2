import pytest
from pydantic import ValidationError

from core.domain import Circle, CopyUnsupported, Rectangle, SealedShape, Shape
from core.interfaces import Prototype


def test_clone_copies_every_field():
    original = Shape(x=10, y=3, color="red")

    copy = original.clone()

    assert isinstance(copy, Shape)
    assert copy is not original
    assert (copy.x, copy.y, copy.color) == (10, 3, "red")


def test_mutating_copy_leaves_original_untouched():
    original = Shape(x=10, y=3, color="red")
    copy = original.clone()

    copy.x = 14
    copy.y = 80
    copy.color = "blue"

    assert (original.x, original.y, original.color) == (10, 3, "red")
    assert (copy.x, copy.y, copy.color) == (14, 80, "blue")


def test_mutating_original_leaves_copy_untouched():
    original = Shape(x=1, y=2, color="green")
    copy = original.clone()

    original.x = -7
    original.color = "black"

    assert (copy.x, copy.y, copy.color) == (1, 2, "green")


def test_copies_of_copies_are_independent():
    original = Shape(x=5, y=5, color="red")
    first = original.clone()
    second = first.clone()

    first.x = 99

    assert second.x == 5
    assert original.x == 5


@pytest.mark.parametrize(
    "shape",
    [
        Rectangle(x=1, y=2, color="red", width=10, height=20),
        Circle(x=3, y=4, color="blue", radius=7),
    ],
)
def test_variants_clone_into_their_own_type(shape):
    copy = shape.clone()

    assert type(copy) is type(shape)
    assert copy == shape
    assert copy is not shape


def test_rectangle_copy_is_detached():
    rect = Rectangle(width=10, height=20)
    copy = rect.clone()

    copy.width = 1

    assert rect.width == 10


def test_sealed_shape_refuses_without_raising(log_records):
    sealed = SealedShape(x=1, y=1, color="grey")

    result = sealed.clone()

    assert isinstance(result, CopyUnsupported)
    assert result.type_name == "SealedShape"
    assert not result
    assert any(level == "WARNING" and "SealedShape" in msg for level, msg in log_records)


def test_copy_unsupported_is_immutable():
    result = SealedShape().clone()

    with pytest.raises(ValidationError):
        result.type_name = "Shape"


def test_field_writes_are_validated():
    shape = Shape()

    with pytest.raises(ValidationError):
        shape.x = "not a number"


def test_shapes_satisfy_prototype_contract():
    for shape in (Shape(), Rectangle(), Circle(), SealedShape()):
        assert isinstance(shape, Prototype)
