"""Bundled sample stations for demos and first-run dashboards."""

from src.ingest.csv_loader import parse_station_csv
from src.ingest.stations import StationDataset

SAMPLE_CSV_FILENAME = "water_quality_sample.csv"

SAMPLE_CSV = """\
station,location,state,latitude,longitude,do,ph,bod,nitrates,coliform,conductivity,temperature,turbidity,phosphates
Sample Station 1,Ganga River,Uttar Pradesh,28.6139,77.209,7.2,7.8,2.5,15,500,350,25,10,0.5
Sample Station 2,Yamuna River,Delhi,19.076,72.8777,6.8,7.6,2.8,18,600,380,26,12,0.6
Sample Station 3,Cauvery River,Karnataka,12.9716,77.5946,6.5,7.5,3.0,20,700,400,27,15,0.7
"""


def load_sample_dataset() -> StationDataset:
    """Parse the sample CSV so sample WQIs come from the scoring engine."""
    return parse_station_csv(SAMPLE_CSV)
