"""Sample job listings, reformatted into one readable line each."""

from __future__ import annotations

from .reformat import Reformatter

DEMO_INPUT = """Lead Chef, Chipotle, Denver, CO, 10, 15
Stunt Double, Equity, Los Angeles, CA, 15, 25
Manager of Fun, IBM, Albany, NY, 30, 40
Associate Tattoo Artist, Tit 4 Tat, Brooklyn, NY, 250, 275
Assistant to the Regional Manager, IBM, Scranton, PA, 10, 15
Lead Guitarist, Philharmonic, Woodstock, NY, 100, 200"""

DEMO_SETTINGS = {
    "input_columns": ["Title", "Organization", "City", "State", "Min", "Max"],
    "header": "All Opportunities",
    "row_template": "Title: {Title}, Organization: {Organization}, Location: {City}, {State}, Pay: {Min}-{Max}",
    "sort_by": "Title",
}


def run_demo() -> str:
    return Reformatter(DEMO_SETTINGS).reformat(DEMO_INPUT)
