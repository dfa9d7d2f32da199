"""Tests for quote/swap details builders and parameter assembly."""

import pytest

from oneinch_swap.errors import InvalidFeeError, InvalidSlippageError, MissingFieldError
from oneinch_swap.swap.details import (
    QuoteDetailsBuilder,
    SwapDetails,
    SwapDetailsBuilder,
    SwapDetailsV6,
    SwapDetailsV6Builder,
)
from oneinch_swap.swap.params import insert_optional_param, param_value


def complete_swap_builder() -> SwapDetailsBuilder:
    builder = SwapDetailsBuilder().src("A").dst("B").amount("1000").from_addr("0xabc")
    return builder.slippage(5).unwrap()


def complete_v6_builder() -> SwapDetailsV6Builder:
    builder = SwapDetailsV6Builder().src("A").dst("B").amount("1000").from_addr("0xabc").origin("0xabc")
    return builder.slippage(5).unwrap()


class TestSwapDetailsBuilder:
    """Tests for the legacy swap builder."""

    def test_valid_builder(self):
        """Test successful construction with a few optional fields."""
        result = complete_swap_builder().disable_estimate(False).allow_partial_fill(False).build()

        assert result.is_ok()
        details = result.value
        assert isinstance(details, SwapDetails)
        assert details.src == "A"
        assert details.dst == "B"
        assert details.amount == "1000"
        assert details.from_addr == "0xabc"
        assert details.slippage == 5
        assert details.disable_estimate is False
        assert details.allow_partial_fill is False
        assert details.fee is None

    @pytest.mark.parametrize("slippage", [51, 102, 1000])
    def test_invalid_slippage(self, slippage):
        """Test slippage above 50 is rejected without touching the builder."""
        builder = SwapDetailsBuilder().src("A").slippage(10).unwrap()

        result = builder.slippage(slippage)

        assert result.is_err()
        assert isinstance(result.error, InvalidSlippageError)
        assert builder.get("slippage") == 10
        assert builder.get("src") == "A"

    @pytest.mark.parametrize("slippage", [0, 1, 50])
    def test_slippage_bounds_accepted(self, slippage):
        """Test slippage within 0..50 is accepted."""
        result = SwapDetailsBuilder().slippage(slippage)

        assert result.is_ok()
        assert result.value.get("slippage") == slippage

    def test_negative_slippage(self):
        """Test slippage is unsigned."""
        result = SwapDetailsBuilder().slippage(-1)

        assert isinstance(result.error, InvalidSlippageError)

    @pytest.mark.parametrize("fee", [4, 5, 255])
    def test_invalid_fee(self, fee):
        """Test fee above 3 is rejected."""
        builder = complete_swap_builder()

        result = builder.fee(fee)

        assert result.is_err()
        assert isinstance(result.error, InvalidFeeError)
        assert builder.get("fee") is None

    @pytest.mark.parametrize("fee", [0, 3])
    def test_fee_bounds_accepted(self, fee):
        """Test fee within 0..3 is accepted."""
        details = complete_swap_builder().fee(fee).unwrap().build().unwrap()

        assert details.fee == fee

    @pytest.mark.parametrize(
        "missing",
        ["src", "dst", "amount", "from_addr", "slippage"],
    )
    def test_missing_required_field(self, missing):
        """Test build fails naming the missing field."""
        builder = SwapDetailsBuilder()
        if missing != "src":
            builder.src("A")
        if missing != "dst":
            builder.dst("B")
        if missing != "amount":
            builder.amount("1000")
        if missing != "from_addr":
            builder.from_addr("0xabc")
        if missing != "slippage":
            builder.slippage(5)

        result = builder.build()

        assert result.is_err()
        assert result.error == MissingFieldError(missing)
        assert str(result.error) == f"Missing {missing}"

    def test_none_amount_is_missing(self):
        """Test amount(None) leaves the required amount unset."""
        result = complete_swap_builder().amount(None).build()

        assert result.is_err()
        assert result.error == MissingFieldError("amount")

    def test_none_gas_price_is_unset(self):
        """Test gas_price(None) produces no gasPrice pair."""
        details = complete_swap_builder().gas_price(None).build().unwrap()

        assert details.gas_price is None
        assert "gasPrice" not in [name for name, _ in details.to_params()]

    def test_first_missing_field_reported(self):
        """Test only the first missing field (in check order) is reported."""
        result = SwapDetailsBuilder().amount("1").build()

        assert result.error.field == "src"

    def test_unwrap_raises_error(self):
        """Test unwrapping a failed build raises the typed error."""
        with pytest.raises(MissingFieldError):
            SwapDetailsBuilder().build().unwrap()

    def test_unwrap_or(self):
        """Test unwrap_or falls back only on failure."""
        assert SwapDetailsBuilder().build().unwrap_or(None) is None
        assert complete_swap_builder().build().unwrap_or(None) is not None

    def test_details_are_immutable(self):
        """Test built details cannot be modified."""
        details = complete_swap_builder().build().unwrap()

        with pytest.raises(AttributeError):
            details.amount = "1"

    def test_amount_kept_as_string(self):
        """Test large amounts are never converted to machine integers."""
        amount = "115792089237316195423570985008687907853269984665640564039457584007913129639935"
        details = complete_swap_builder().amount(amount).build().unwrap()

        assert details.amount == amount
        assert ("amount", amount) in details.to_params()


class TestSwapDetailsV6Builder:
    """Tests for the v6 swap builder."""

    def test_valid_builder(self):
        """Test v6 details carry origin and usePermit2."""
        details = complete_v6_builder().use_permit2(True).build().unwrap()

        assert isinstance(details, SwapDetailsV6)
        assert details.origin == "0xabc"
        assert details.use_permit2 is True

    def test_origin_required(self):
        """Test v6 build requires origin."""
        builder = SwapDetailsV6Builder().src("A").dst("B").amount("1000").from_addr("0xabc")
        builder.slippage(5)

        result = builder.build()

        assert result.error == MissingFieldError("origin")

    def test_origin_checked_before_slippage(self):
        """Test origin is reported before slippage."""
        result = SwapDetailsV6Builder().src("A").dst("B").amount("1").from_addr("0xabc").build()

        assert result.error.field == "origin"

    def test_missing_sender_named_from_addr(self):
        """Test the v6 builder reports a missing sender as from_addr."""
        builder = SwapDetailsV6Builder().src("A").dst("B").amount("1").origin("0xabc")
        builder.slippage(5)

        assert builder.build().error == MissingFieldError("from_addr")

    def test_invalid_slippage(self):
        """Test v6 shares the slippage range."""
        result = SwapDetailsV6Builder().slippage(51)

        assert isinstance(result.error, InvalidSlippageError)

    def test_invalid_fee(self):
        """Test v6 shares the fee range."""
        result = SwapDetailsV6Builder().fee(4)

        assert isinstance(result.error, InvalidFeeError)


class TestQuoteDetailsBuilder:
    """Tests for the quote builder."""

    def test_valid_builder(self):
        """Test quote details need only src, dst and amount."""
        details = QuoteDetailsBuilder().src("A").dst("B").amount(1000).build().unwrap()

        assert details.amount == "1000"
        assert details.to_params() == [("src", "A"), ("dst", "B"), ("amount", "1000")]

    def test_missing_amount(self):
        """Test quote build fails without amount."""
        result = QuoteDetailsBuilder().src("A").dst("B").build()

        assert result.error == MissingFieldError("amount")

    def test_invalid_fee(self):
        """Test quote fee range."""
        assert isinstance(QuoteDetailsBuilder().fee(10).error, InvalidFeeError)

    def test_no_swap_only_setters(self):
        """Test quote builder does not offer swap-only fields."""
        builder = QuoteDetailsBuilder()

        assert not hasattr(builder, "slippage")
        assert not hasattr(builder, "from_addr")


class TestParameterAssembly:
    """Tests for query parameter assembly."""

    def test_required_only(self):
        """Test required pairs in fixed order and nothing else."""
        details = complete_swap_builder().build().unwrap()

        assert details.to_params() == [
            ("from", "0xabc"),
            ("slippage", "5"),
            ("src", "A"),
            ("dst", "B"),
            ("amount", "1000"),
        ]

    def test_v6_required_only(self):
        """Test v6 appends origin to the required pairs."""
        details = complete_v6_builder().build().unwrap()

        assert details.to_params() == [
            ("from", "0xabc"),
            ("slippage", "5"),
            ("src", "A"),
            ("dst", "B"),
            ("amount", "1000"),
            ("origin", "0xabc"),
        ]

    def test_optional_values_canonical(self):
        """Test set optional fields appear once in canonical string form."""
        builder = complete_swap_builder()
        builder.fee(2)
        builder.gas_limit(10000000).complexity_level(2).parts(10).main_route_parts(5)
        builder.include_gas(True).include_protocols(False).disable_estimate(True)
        builder.gas_price(1000000000).protocols("UNISWAP_V3").receiver("0xrcv").referrer("0xref")

        params = builder.build().unwrap().to_params()
        names = [name for name, _ in params]

        assert len(names) == len(set(names))
        pairs = dict(params)
        assert pairs["fee"] == "2"
        assert pairs["gasLimit"] == "10000000"
        assert pairs["complexityLevel"] == "2"
        assert pairs["parts"] == "10"
        assert pairs["mainRouteParts"] == "5"
        assert pairs["includeGas"] == "true"
        assert pairs["includeProtocols"] == "false"
        assert pairs["disableEstimate"] == "true"
        assert pairs["gasPrice"] == "1000000000"
        assert pairs["protocols"] == "UNISWAP_V3"
        assert pairs["receiver"] == "0xrcv"
        assert pairs["referrer"] == "0xref"

    @pytest.mark.parametrize(
        "setter,name,value,expected",
        [
            ("disable_estimate", "disableEstimate", True, "true"),
            ("allow_partial_fill", "allowPartialFill", True, "true"),
            ("allow_partial_fill", "allowPartialFill", False, "false"),
            ("include_gas", "includeGas", True, "true"),
            ("include_protocols", "includeProtocols", True, "true"),
            ("include_tokens_info", "includeTokensInfo", True, "true"),
            ("include_tokens_info", "includeTokensInfo", False, "false"),
            ("complexity_level", "complexityLevel", 3, "3"),
            ("parts", "parts", 50, "50"),
            ("main_route_parts", "mainRouteParts", 10, "10"),
            ("gas_limit", "gasLimit", 750000, "750000"),
            ("protocols", "protocols", "UNISWAP_V2,CURVE", "UNISWAP_V2,CURVE"),
            ("gas_price", "gasPrice", 30000000000, "30000000000"),
            ("connector_tokens", "connectorTokens", "0x1,0x2", "0x1,0x2"),
            ("permit", "permit", "0xsig", "0xsig"),
            ("receiver", "receiver", "0xrcv", "0xrcv"),
            ("referrer", "referrer", "0xref", "0xref"),
            ("use_permit2", "usePermit2", True, "true"),
            ("use_permit2", "usePermit2", False, "false"),
        ],
    )
    def test_each_optional_field_emitted_once(self, setter, name, value, expected):
        """Test a set optional field yields exactly one canonical pair."""
        builder = complete_v6_builder()
        getattr(builder, setter)(value)

        params = builder.build().unwrap().to_params()

        assert [v for n, v in params if n == name] == [expected]
        assert len(params) == 7

    def test_fee_emitted_once(self):
        """Test a set fee yields exactly one pair."""
        params = complete_v6_builder().fee(0).unwrap().build().unwrap().to_params()

        assert [v for n, v in params if n == "fee"] == ["0"]

    def test_unset_optional_fields_absent(self):
        """Test unset optional fields produce no pair at all."""
        params = complete_swap_builder().include_gas(True).build().unwrap().to_params()
        names = {name for name, _ in params}

        for absent in ("fee", "permit", "allowPartialFill", "connectorTokens", "usePermit2"):
            assert absent not in names

    def test_use_permit2_only_on_v6(self):
        """Test usePermit2 is emitted last by v6 details."""
        params = complete_v6_builder().use_permit2(False).permit("0xsig").build().unwrap().to_params()

        assert params[-1] == ("usePermit2", "false")
        assert ("permit", "0xsig") in params

    def test_insert_optional_param(self):
        """Test insert_optional_param skips None."""
        params = []
        insert_optional_param(params, "fee", None)
        insert_optional_param(params, "fee", 0)
        insert_optional_param(params, "includeGas", False)

        assert params == [("fee", "0"), ("includeGas", "false")]

    def test_param_value(self):
        """Test canonical conversion."""
        assert param_value(True) == "true"
        assert param_value(False) == "false"
        assert param_value(42) == "42"
        assert param_value("0x1") == "0x1"
