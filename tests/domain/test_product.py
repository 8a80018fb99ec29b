"""Unit tests for the Product aggregate."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from catalog.domain.exceptions import InvalidArgumentError, ValidationError
from catalog.domain.model.parameters import (
    AddPositionsToProductParameters,
    CreateProductParameters,
    DeletePositionsFromProductParameters,
    ProductPositionSpec,
    SetProductDescriptionParameters,
    SetProductTitleParameters,
)
from catalog.domain.model.product import Product
from tests.fakes import T0, FakeTimeProvider

A = UUID("00000000-0000-0000-0000-00000000000a")
B = UUID("00000000-0000-0000-0000-00000000000b")
C = UUID("00000000-0000-0000-0000-00000000000c")


def _product(clock=None, title="Widget", description="A thing"):
    clock = clock or FakeTimeProvider()
    return Product.create(
        CreateProductParameters(title=title, description=description, time_provider=clock)
    )


def _add(product, clock, *ids):
    return product.add_positions(
        AddPositionsToProductParameters(
            positions=[ProductPositionSpec(i) for i in ids],
            time_provider=clock,
        )
    )


def _ids(product):
    return [p.measurement_unit_position_id for p in product.positions]


class TestProductCreate:

    def test_title_and_description_are_trimmed(self):
        product = _product(title=" Widget ", description=" A thing ")
        assert product.title == "Widget"
        assert product.description == "A thing"
        assert product.positions == ()

    def test_inner_whitespace_is_kept(self):
        product = _product(title="\t Big  Widget \n")
        assert product.title == "Big  Widget"

    def test_timestamps_come_from_time_provider(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        assert product.created_at == T0
        assert product.updated_at == T0

    def test_created_at_equals_first_updated_at(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        assert clock.calls == 1
        assert product.updated_at == product.created_at

    def test_each_product_gets_a_fresh_id(self):
        assert _product().id != _product().id
        assert isinstance(_product().id, UUID)

    def test_none_title_rejected(self):
        with pytest.raises(InvalidArgumentError, match="title is required"):
            _product(title=None)

    def test_none_description_rejected(self):
        with pytest.raises(InvalidArgumentError, match="description is required"):
            _product(description=None)

    def test_non_string_title_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must be a string"):
            _product(title=42)

    def test_missing_time_provider_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Time provider"):
            Product.create(
                CreateProductParameters(title="Widget", description="", time_provider=None)
            )

    def test_invalid_argument_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            _product(title=None)


class TestProductSetters:

    def test_set_title_trims_and_advances_updated_at(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(minutes=5)

        product.set_title(SetProductTitleParameters(title="  Gadget ", time_provider=clock))

        assert product.title == "Gadget"
        assert product.updated_at == later
        assert product.created_at == T0

    def test_set_description_trims_and_advances_updated_at(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(seconds=1)

        product.set_description(
            SetProductDescriptionParameters(description=" Shiny ", time_provider=clock)
        )

        assert product.description == "Shiny"
        assert product.updated_at == later

    def test_set_title_none_rejected_and_state_unchanged(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        clock.advance(minutes=1)

        with pytest.raises(InvalidArgumentError):
            product.set_title(SetProductTitleParameters(title=None, time_provider=clock))

        assert product.title == "Widget"
        assert product.updated_at == T0

    def test_set_description_without_time_provider_rejected(self):
        product = _product()
        with pytest.raises(InvalidArgumentError, match="Time provider"):
            product.set_description(
                SetProductDescriptionParameters(description="x", time_provider=None)
            )
        assert product.description == "A thing"

    def test_updated_at_never_moves_backwards(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        clock.now = T0 - timedelta(hours=1)

        product.set_title(SetProductTitleParameters(title="Older", time_provider=clock))

        assert product.title == "Older"
        assert product.updated_at == T0
        assert product.updated_at >= product.created_at


class TestProductAddPositions:

    def test_duplicates_in_input_collapse_to_one(self):
        clock = FakeTimeProvider()
        product = _product(clock)

        _add(product, clock, A, A, B)

        assert _ids(product) == [A, B]

    def test_existing_positions_are_not_duplicated(self):
        clock = FakeTimeProvider()
        product = _product(clock)

        _add(product, clock, A)
        first = product.positions[0]
        _add(product, clock, A, C)

        assert _ids(product) == [A, C]
        assert product.positions[0] is first

    def test_same_descriptor_twice_is_idempotent(self):
        clock = FakeTimeProvider()
        product = _product(clock)

        _add(product, clock, B)
        _add(product, clock, B)

        assert _ids(product) == [B]

    def test_new_positions_are_appended_in_input_order(self):
        clock = FakeTimeProvider()
        product = _product(clock)

        _add(product, clock, C)
        _add(product, clock, B, A)

        assert _ids(product) == [C, B, A]

    def test_returns_only_new_positions(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        _add(product, clock, A)

        added = _add(product, clock, A, B, B)

        assert [p.measurement_unit_position_id for p in added] == [B]

    def test_positions_are_owned_by_product(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(minutes=2)

        (position,) = _add(product, clock, A)

        assert position.product is product
        assert position.created_at == later
        assert position.updated_at == later

    def test_add_advances_updated_at(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(minutes=2)

        _add(product, clock, A)

        assert product.updated_at == later

    def test_empty_input_still_advances_updated_at(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(minutes=3)

        added = _add(product, clock)

        assert added == ()
        assert product.positions == ()
        assert product.updated_at == later

    def test_accepts_a_generator(self):
        clock = FakeTimeProvider()
        product = _product(clock)

        product.add_positions(
            AddPositionsToProductParameters(
                positions=(ProductPositionSpec(i) for i in (A, B, A)),
                time_provider=clock,
            )
        )

        assert _ids(product) == [A, B]

    def test_none_positions_rejected(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        with pytest.raises(InvalidArgumentError):
            product.add_positions(
                AddPositionsToProductParameters(positions=None, time_provider=clock)
            )

    def test_positions_view_is_read_only(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        _add(product, clock, A)

        view = product.positions
        assert isinstance(view, tuple)
        with pytest.raises(AttributeError):
            view.append(None)
        assert len(product.positions) == 1


class TestProductDeletePositions:

    def test_removes_matching_and_ignores_foreign_positions(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        other = _product(clock, title="Other")
        _add(product, clock, A, B)
        (foreign,) = _add(other, clock, C)
        b = product.find_position(B)

        removed = product.delete_positions(
            DeletePositionsFromProductParameters(
                product_positions=[b, foreign], time_provider=clock
            )
        )

        assert _ids(product) == [A]
        assert removed == (b,)
        assert _ids(other) == [C]

    def test_foreign_position_with_same_measurement_unit_is_not_removed(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        other = _product(clock, title="Other")
        _add(product, clock, A)
        (lookalike,) = _add(other, clock, A)

        product.delete_positions(
            DeletePositionsFromProductParameters(
                product_positions=[lookalike], time_provider=clock
            )
        )

        assert _ids(product) == [A]

    def test_delete_advances_updated_at_even_when_nothing_removed(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        later = clock.advance(hours=1)

        removed = product.delete_positions(
            DeletePositionsFromProductParameters(product_positions=[], time_provider=clock)
        )

        assert removed == ()
        assert product.updated_at == later

    def test_positions_can_be_added_again_after_delete(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        _add(product, clock, A, B)
        product.delete_positions(
            DeletePositionsFromProductParameters(
                product_positions=[product.find_position(A)], time_provider=clock
            )
        )

        _add(product, clock, A)

        assert _ids(product) == [B, A]

    def test_none_positions_rejected(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        with pytest.raises(InvalidArgumentError):
            product.delete_positions(
                DeletePositionsFromProductParameters(
                    product_positions=None, time_provider=clock
                )
            )


class TestProductFindPosition:

    def test_find_existing(self):
        clock = FakeTimeProvider()
        product = _product(clock)
        _add(product, clock, A, B)
        assert product.find_position(B).measurement_unit_position_id == B

    def test_find_missing_returns_none(self):
        assert _product().find_position(uuid4()) is None


class TestProductRehydrate:

    def test_constructor_keeps_stored_fields_and_binds_positions(self):
        clock = FakeTimeProvider()
        original = _product(clock)
        _add(original, clock, A)
        position = original.positions[0]
        position.product = None

        product = Product(
            id=original.id,
            title="  stored as is  ",
            description="",
            created_at=T0,
            updated_at=T0 + timedelta(days=1),
            positions=[position],
        )

        assert product.title == "  stored as is  "
        assert product.updated_at == T0 + timedelta(days=1)
        assert product.positions == (position,)
        assert position.product is product
