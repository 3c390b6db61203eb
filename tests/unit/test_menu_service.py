"""Unit tests for menu service."""
import uuid
from decimal import Decimal

import pytest

from kitchenpos.core.exceptions import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.services.catalog.models import MenuPriceRequest, MenuProductRequest, MenuRequest
from tests.factories import create_menu, create_menu_group, create_product


@pytest.fixture
async def menu_group(test_db):
    return await create_menu_group(test_db)


@pytest.fixture
async def product(test_db):
    return await create_product(test_db, price=Decimal("16000"))


def menu_request(menu_group, product, price=Decimal("19000"), quantity=2, name="chicken set"):
    return MenuRequest(
        name=name,
        price=price,
        menu_group_id=menu_group.id,
        displayed=True,
        menu_products=[MenuProductRequest(product_id=product.id, quantity=quantity)],
    )


class TestCreateMenu:
    """Test menu registration."""

    @pytest.mark.asyncio
    async def test_create_menu(self, menu_service, profanity_client, menu_group, product):
        """Test that a valid menu is stored with its products."""
        menu = await menu_service.create(menu_request(menu_group, product))

        assert menu.id is not None
        assert menu.name == "chicken set"
        assert menu.price == Decimal("19000")
        assert menu.menu_group.id == menu_group.id
        assert menu.displayed is True
        assert [(mp.product.id, mp.quantity) for mp in menu.menu_products] == [(product.id, 2)]
        profanity_client.contains_profanity.assert_awaited_once_with("chicken set")

        menus = await menu_service.find_all()
        assert [m.id for m in menus] == [menu.id]

    @pytest.mark.asyncio
    async def test_name_required(self, menu_service, menu_group, product):
        """Test that a menu needs a name."""
        with pytest.raises(InvalidArgumentError):
            await menu_service.create(menu_request(menu_group, product, name=None))

    @pytest.mark.asyncio
    async def test_profane_name_rejected(self, menu_service, profanity_client, menu_group, product):
        """Test that profane names are rejected."""
        profanity_client.contains_profanity.return_value = True

        with pytest.raises(InvalidArgumentError):
            await menu_service.create(menu_request(menu_group, product, name="badword"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [None, Decimal("-0.01")])
    async def test_invalid_price(self, menu_service, menu_group, product, price):
        """Test that price is required and non-negative."""
        request = menu_request(menu_group, product)
        request.price = price

        with pytest.raises(InvalidArgumentError):
            await menu_service.create(request)

    @pytest.mark.asyncio
    async def test_unknown_menu_group(self, menu_service, menu_group, product):
        """Test that the menu group must exist."""
        request = menu_request(menu_group, product)
        request.menu_group_id = uuid.uuid4()

        with pytest.raises(NotFoundError):
            await menu_service.create(request)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("menu_products", [None, []])
    async def test_menu_products_required(self, menu_service, menu_group, product, menu_products):
        """Test that a menu needs at least one product."""
        request = menu_request(menu_group, product)
        request.menu_products = menu_products

        with pytest.raises(InvalidArgumentError):
            await menu_service.create(request)

    @pytest.mark.asyncio
    async def test_unknown_product(self, menu_service, menu_group, product):
        """Test that every menu product must refer to an existing product."""
        request = menu_request(menu_group, product)
        request.menu_products.append(MenuProductRequest(product_id=uuid.uuid4(), quantity=1))

        with pytest.raises(InvalidArgumentError):
            await menu_service.create(request)

    @pytest.mark.asyncio
    async def test_negative_quantity(self, menu_service, menu_group, product):
        """Test that menu product quantities are non-negative."""
        with pytest.raises(InvalidArgumentError):
            await menu_service.create(menu_request(menu_group, product, quantity=-1))

    @pytest.mark.asyncio
    async def test_price_above_products_amount(self, menu_service, menu_group, product):
        """Test that a menu may not cost more than its products."""
        with pytest.raises(InvalidArgumentError):
            await menu_service.create(
                menu_request(menu_group, product, price=Decimal("32000.01"))
            )

    @pytest.mark.asyncio
    async def test_price_equal_to_products_amount(self, menu_service, menu_group, product):
        """Test that a menu may cost exactly its products."""
        menu = await menu_service.create(menu_request(menu_group, product, price=Decimal("32000")))

        assert menu.price == Decimal("32000")


class TestChangeMenuPrice:
    """Test menu price changes."""

    @pytest.mark.asyncio
    async def test_change_price(self, test_db, menu_service, menu_group):
        """Test lowering a two-product menu to the price of one product."""
        chicken = await create_product(test_db, "chicken", Decimal("1"))
        pizza = await create_product(test_db, "pizza", Decimal("1"))
        menu = await create_menu(
            test_db, menu_group, [(chicken, 1), (pizza, 1)], price=Decimal("2")
        )

        changed = await menu_service.change_price(menu.id, MenuPriceRequest(price=Decimal("1")))

        assert changed.id == menu.id
        assert changed.price == Decimal("1")

    @pytest.mark.asyncio
    async def test_change_price_to_products_amount(self, test_db, menu_service, menu_group):
        """Test that the products amount itself is an allowed price."""
        chicken = await create_product(test_db, "chicken", Decimal("1"))
        pizza = await create_product(test_db, "pizza", Decimal("1"))
        menu = await create_menu(
            test_db, menu_group, [(chicken, 1), (pizza, 1)], price=Decimal("1")
        )

        changed = await menu_service.change_price(menu.id, MenuPriceRequest(price=Decimal("2")))

        assert changed.price == Decimal("2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [None, Decimal("-0.0001")])
    async def test_invalid_price(self, test_db, menu_service, menu_group, product, price):
        """Test that the new price is required and non-negative."""
        menu = await create_menu(test_db, menu_group, [(product, 1)], price=Decimal("1"))

        with pytest.raises(InvalidArgumentError):
            await menu_service.change_price(menu.id, MenuPriceRequest(price=price))

    @pytest.mark.asyncio
    async def test_price_above_products_amount(self, test_db, menu_service, menu_group, product):
        """Test that the new price may not exceed the products amount."""
        menu = await create_menu(test_db, menu_group, [(product, 1)], price=Decimal("10"))

        with pytest.raises(InvalidArgumentError):
            await menu_service.change_price(
                menu.id, MenuPriceRequest(price=Decimal("100000000"))
            )
        assert menu.price == Decimal("10")

    @pytest.mark.asyncio
    async def test_unknown_menu(self, menu_service):
        """Test that changing an unknown menu fails with not-found."""
        with pytest.raises(NotFoundError):
            await menu_service.change_price(uuid.uuid4(), MenuPriceRequest(price=Decimal("1")))


class TestDisplayMenu:
    """Test showing and hiding menus."""

    @pytest.mark.asyncio
    async def test_display(self, test_db, menu_service, menu_group, product):
        """Test that a correctly priced menu can be displayed."""
        menu = await create_menu(test_db, menu_group, [(product, 1)], price=Decimal("10"), displayed=False)

        displayed = await menu_service.display(menu.id)

        assert displayed.displayed is True

    @pytest.mark.asyncio
    async def test_display_overpriced_menu(self, test_db, menu_service, menu_group, product):
        """Test that a menu costing more than its products stays hidden."""
        menu = await create_menu(
            test_db, menu_group, [(product, 1)], price=Decimal("100000000"), displayed=False
        )

        with pytest.raises(IllegalStateError):
            await menu_service.display(menu.id)
        assert menu.displayed is False

    @pytest.mark.asyncio
    async def test_hide(self, test_db, menu_service, menu_group, product):
        """Test that a displayed menu can be hidden."""
        menu = await create_menu(test_db, menu_group, [(product, 1)], price=Decimal("10"))

        hidden = await menu_service.hide(menu.id)

        assert hidden.displayed is False

    @pytest.mark.asyncio
    async def test_display_unknown_menu(self, menu_service):
        """Test that displaying an unknown menu fails with not-found."""
        with pytest.raises(NotFoundError):
            await menu_service.display(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_find_all(self, test_db, menu_service, menu_group, product):
        """Test that displayed and hidden menus are both listed."""
        menu1 = await create_menu(test_db, menu_group, [(product, 1)], price=Decimal("10"))
        menu2 = await create_menu(
            test_db, menu_group, [(product, 1)], price=Decimal("10"), displayed=False
        )

        menus = await menu_service.find_all()

        assert {menu.id for menu in menus} == {menu1.id, menu2.id}
