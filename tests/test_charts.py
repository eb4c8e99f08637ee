from realestate_calc.config import X_AXIS_TICKS
from realestate_calc.data.models import Property, properties_to_frame
from realestate_calc.ui.components.charts import price_vs_sqft_scatter


def test_scatter_plots_square_feet_against_price(sample_properties):
    fig = price_vs_sqft_scatter(properties_to_frame(sample_properties))
    trace = fig.data[0]
    assert list(trace.x) == [p.square_feet for p in sample_properties]
    assert list(trace.y) == [p.price for p in sample_properties]
    assert trace.name == "Price vs Square Feet"


def test_x_axis_ticks_and_range(sample_properties):
    fig = price_vs_sqft_scatter(properties_to_frame(sample_properties))
    assert list(fig.layout.xaxis.tickvals) == X_AXIS_TICKS
    assert list(fig.layout.xaxis.range) == [0, 2500]
    assert fig.layout.yaxis.autorange is True


def test_empty_collection_renders_empty_chart():
    fig = price_vs_sqft_scatter(properties_to_frame([]))
    assert all(trace.x is None or len(trace.x) == 0 for trace in fig.data)
    assert list(fig.layout.xaxis.tickvals) == X_AXIS_TICKS


def test_frame_has_fixed_columns():
    df = properties_to_frame([Property(price=1, days_on_market=3), Property(price=2)])
    assert list(df.columns) == [
        "price",
        "beds",
        "baths",
        "zip_code",
        "square_feet",
        "lot_size",
        "price_per_square_foot",
        "days_on_market",
        "year_built",
    ]
    assert df["days_on_market"].isna().tolist() == [False, True]
    assert list(properties_to_frame([]).columns) == list(df.columns)
