import pandas as pd
import yaml
import os.path
from . import loader
from .headers import fields

class CopepodData:
    def __init__(self, data: pd.DataFrame, **meta):
        self.data = data
        self.meta = meta

    @classmethod
    def load(cls, path: str, **kws):
        """Load a COPEPOD short-format file."""
        with open(path, 'r', encoding='utf-8') as f:
            df, block, raw_headers = loader.read(f)
        meta = {
            "filename": os.path.split(path)[-1],
            "comments": block.comments,
            "raw_headers": raw_headers,
        }
        meta.update(kws)
        return cls(df, **meta)

    def __repr__(self):
        return f"""{yaml.dump(self.meta)}

{self.data.describe().T.to_string()}"""

    def __len__(self):
        return len(self.data)

    def numeric_columns(self):
        return [name for name, dtype in self.data.dtypes.items() if pd.api.types.is_float_dtype(dtype)]

    def describe_fields(self):
        """Kind and description of each column, from the field catalogue."""
        known = fields.reindex(self.data.columns)
        numeric = set(self.numeric_columns())
        return pd.DataFrame({
            "kind": ["numeric" if name in numeric else "text" for name in self.data.columns],
            "description": known.description.fillna("").values,
        }, index=pd.Index(self.data.columns, name="name"))
