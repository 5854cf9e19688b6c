from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    half_res_url: str
    full_res_url: str

    def to_dict(self) -> dict:
        return {"halfurl": self.half_res_url, "fullurl": self.full_res_url}
