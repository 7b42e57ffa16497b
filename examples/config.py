"""Draw a three-slice chart with a legend to the terminal."""

from piechart import Chart, Color, DataPoint

data = [
    DataPoint(label="dd1", value=4.0, color=Color.RED, fill="•"),
    DataPoint(label="dd2", value=2.0, color=Color.GREEN, fill="•"),
    DataPoint(label="dd3", value=2.6, color=Color.BLUE, fill="•"),
]

Chart().radius(9).aspect_ratio(2).legend(True).draw(data)
