from filter_commons.constants.filter_op import FilterOp
from filter_commons.model.filter_model import Filter, ViewConfig, ViewConfigUpdate
from filter_commons.model.scalar_model import FilterTerm, Scalar


def test_default_filter_is_null_equality():
    item = Filter(column="name")
    assert item.op is FilterOp.EQ
    assert item.term == FilterTerm.of_scalar(Scalar.null())


def test_consistency():
    array = FilterTerm.of_array([Scalar.of_string("a")])
    assert Filter(column="name", op=FilterOp.IN, term=array).is_consistent
    assert not Filter(column="name", op=FilterOp.EQ, term=array).is_consistent
    assert not Filter(column="name", op=FilterOp.IN).is_consistent


def test_with_op_keeps_term():
    item = Filter(column="name", term=FilterTerm.of_scalar(Scalar.of_string("x")))
    updated = item.with_op(FilterOp.IN)
    assert updated.op is FilterOp.IN
    assert updated.term == item.term
    assert item.op is FilterOp.EQ


def test_op_from_wire_value():
    assert Filter(column="name", op="begins with").op is FilterOp.BEGINS_WITH


def test_update_to_config_only_has_filter():
    update = ViewConfigUpdate(filter=(
        Filter(column="price", op=FilterOp.GT, term=FilterTerm.of_scalar(Scalar.of_float(10))),
        Filter(column="name", op=FilterOp.IN, term=FilterTerm.of_array([Scalar.of_string("a"), Scalar.of_string("b")])),
    ))
    assert update.to_config() == {
        "filter": [
            ["price", ">", 10.0],
            ["name", "in", ["a", "b"]],
        ]
    }


def test_empty_update_to_config():
    assert ViewConfigUpdate().to_config() == {}


def test_apply_replaces_filter_list():
    config = ViewConfig(filter=(Filter(column="name"),))
    new_filters = (Filter(column="price", op=FilterOp.LT),)

    applied = config.apply(ViewConfigUpdate(filter=new_filters))

    assert applied.filter == new_filters
    assert config.filter == (Filter(column="name"),)


def test_apply_empty_update_is_noop():
    config = ViewConfig(filter=(Filter(column="name"),))
    assert config.apply(ViewConfigUpdate()) is config
