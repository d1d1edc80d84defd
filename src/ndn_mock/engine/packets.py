# In-memory Interest and Data packets; never wire-encoded
from dataclasses import dataclass, field
from typing import Optional

from ndn.encoding import Name, FormalName, InterestParam

from ..utils import name_to_str, same_name


@dataclass
class Interest:
    name: FormalName
    param: InterestParam = field(default_factory=InterestParam)
    app_param: Optional[bytes] = None

    def matches_data(self, data: 'Data') -> bool:
        """True if ``data`` satisfies this Interest (prefix match only with CanBePrefix)."""
        if self.param.can_be_prefix:
            return Name.is_prefix(self.name, data.name)
        return same_name(self.name, data.name)

    def __str__(self) -> str:
        return name_to_str(self.name)


@dataclass
class Data:
    name: FormalName
    content: bytes = b''
    freshness_period: Optional[int] = None

    def __str__(self) -> str:
        return name_to_str(self.name)
