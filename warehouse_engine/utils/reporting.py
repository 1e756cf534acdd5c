from typing import Any, Dict, Sequence
from datetime import datetime
from decimal import Decimal
import pandas as pd

from ..core.models import Product
from .money import sum_money


class CategoryReport:
    """Per-category inventory summary tables"""

    COLUMNS = ['product_count', 'total_value', 'min_price', 'max_price', 'total_weight']

    def __init__(self):
        self.report_timestamp = datetime.now()

    def to_dataframe(self, products: Sequence[Product]) -> pd.DataFrame:
        """One row per product with float price and weight columns"""
        records = [{
            'id': str(p.id),
            'name': p.name,
            'category': p.category.name,
            'price': float(p.price),
            'weight': p.weight_kg,
            'perishable': p.is_perishable,
            'shippable': p.is_shippable
        } for p in products]

        return pd.DataFrame(records, columns=['id', 'name', 'category', 'price',
                                              'weight', 'perishable', 'shippable'])

    def category_summary(self, products: Sequence[Product]) -> pd.DataFrame:
        """Counts, exact value totals, price range and weight per category"""
        if not products:
            return pd.DataFrame(columns=self.COLUMNS).rename_axis('category')

        df = self.to_dataframe(products)
        summary = df.groupby('category', sort=False).agg(
            product_count=('name', 'count'),
            min_price=('price', 'min'),
            max_price=('price', 'max'),
            total_weight=('weight', 'sum')
        )

        # Totals are summed as Decimal rather than from the float column
        totals: Dict[str, Decimal] = {}
        for category in summary.index:
            totals[category] = sum_money(p.price for p in products if p.category.name == category)
        summary['total_value'] = pd.Series(totals, dtype=object)

        return summary[self.COLUMNS]

    def summary_dict(self, products: Sequence[Product]) -> Dict[str, Any]:
        """Report as a plain dict keyed by category name"""
        summary = self.category_summary(products)
        return {
            'generated_at': self.report_timestamp.isoformat(),
            'categories': summary.to_dict('index')
        }
