# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray

class HittableList(Hittable):
    """
    The scene: an ordered list of Hittable objects, tested exhaustively.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            # Only strictly closer hits can replace the current record.
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
