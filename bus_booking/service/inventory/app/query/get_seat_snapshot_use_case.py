from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_query_repo import ISeatQueryRepo
from bus_booking.service.inventory.domain.entity.seat_entity import Seat


class GetSeatSnapshotUseCase:
    def __init__(self, *, seat_query_repo: ISeatQueryRepo) -> None:
        self.seat_query_repo = seat_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_query_repo: ISeatQueryRepo = Depends(Provide[Container.seat_query_repo]),
    ) -> Self:
        return cls(seat_query_repo=seat_query_repo)

    @Logger.io
    async def execute(self) -> List[Seat]:
        return await self.seat_query_repo.snapshot()
