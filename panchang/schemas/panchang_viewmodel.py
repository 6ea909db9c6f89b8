"""Panchang viewmodel schemas used by the Panchang API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class LocationVM(CamelModel):
    latitude: float
    longitude: float


class TimeWindowVM(CamelModel):
    start: datetime
    end: datetime
    duration_minutes: int


class SunMoonVM(CamelModel):
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    moonrise: Optional[datetime] = None
    moonset: Optional[datetime] = None


class TithiVM(CamelModel):
    number: int = Field(ge=1, le=30)
    name: str
    hindi: str
    paksha: str
    paksha_hindi: str
    progress: float
    ends_at: Optional[datetime] = None


class NakshatraVM(CamelModel):
    number: int = Field(ge=1, le=27)
    name: str
    hindi: str
    lord: str
    lord_hindi: str
    deity: str
    progress: float
    ends_at: Optional[datetime] = None


class YogaVM(CamelModel):
    number: int = Field(ge=1, le=27)
    name: str
    hindi: str
    progress: float
    ends_at: Optional[datetime] = None


class KaranaVM(CamelModel):
    number: int = Field(ge=1, le=11)
    name: str
    hindi: str
    ends_at: Optional[datetime] = None
    is_first_half: bool


class RashiVM(CamelModel):
    index: int = Field(ge=1, le=12)
    name: str
    english: str
    hindi: str


class SunNakshatraVM(CamelModel):
    number: int
    name: str
    hindi: str


class RashisVM(CamelModel):
    sun: RashiVM
    moon: RashiVM
    sun_nakshatra: SunNakshatraVM


class SamvatsVM(CamelModel):
    vikram_samvat: int
    shaka_samvat: int


class MonthsVM(CamelModel):
    amanta: str
    amanta_hindi: str
    purnimanta: str
    purnimanta_hindi: str


class RituAyanaVM(CamelModel):
    ritu: str
    ritu_hindi: str
    season: str
    ayana: str
    ayana_hindi: str
    half_year: str


class DurationVM(CamelModel):
    hours: int
    minutes: int
    total_minutes: int
    formatted: str


class DayNightVM(CamelModel):
    dinamana: DurationVM
    ratrimana: DurationVM


class AuspiciousTimesVM(CamelModel):
    brahma_muhurta: Optional[TimeWindowVM] = None
    pratah_sandhya: Optional[TimeWindowVM] = None
    abhijit_muhurta: Optional[TimeWindowVM] = None
    vijaya_muhurta: Optional[TimeWindowVM] = None
    godhuli_muhurta: Optional[TimeWindowVM] = None
    sayahna_sandhya: Optional[TimeWindowVM] = None
    nishita_muhurta: Optional[TimeWindowVM] = None
    amrit_kaal: Optional[TimeWindowVM] = None


class InauspiciousTimesVM(CamelModel):
    rahu_kaal: Optional[TimeWindowVM] = None
    gulika_kaal: Optional[TimeWindowVM] = None
    yama_ghanta: Optional[TimeWindowVM] = None
    dur_muhurtam: List[TimeWindowVM] = Field(default_factory=list)
    varjyam: List[TimeWindowVM] = Field(default_factory=list)
    bhadra: Optional[TimeWindowVM] = None


class SpecialYogasVM(CamelModel):
    sarvartha_siddhi: bool
    amrit_siddhi: bool
    ravi_pushya: bool
    guru_pushya: bool
    dwipushkar: bool
    tripushkar: bool
    gand_mool: bool
    vyatipata_vaidhriti: bool


class PanchakaSegmentVM(CamelModel):
    index: int = Field(ge=1, le=14)
    start: datetime
    end: datetime
    type: str
    type_hindi: str
    is_good: bool


class FestivalVM(CamelModel):
    name: str
    hindi: str
    type: str


class RecommendationVM(CamelModel):
    score: int = Field(ge=0, le=100)
    suitable: bool
    reason: str
    reason_hindi: str
    best_time: Optional[TimeWindowVM] = None
    avoid_time: Optional[TimeWindowVM] = None


class RecommendationsVM(CamelModel):
    property_and_home: RecommendationVM
    religious_and_spiritual: RecommendationVM
    general_activities: RecommendationVM


class SummaryVM(CamelModel):
    day_type: str
    day_type_hindi: str
    good_for: List[str] = Field(default_factory=list)
    avoid_for: List[str] = Field(default_factory=list)
    special_note: Optional[str] = None
    special_note_hindi: Optional[str] = None


class PanchangReport(CamelModel):
    date: str
    weekday: str
    weekday_hindi: str
    location: LocationVM
    sun_moon: SunMoonVM
    tithi: TithiVM
    nakshatra: NakshatraVM
    yoga: YogaVM
    karanas: List[KaranaVM] = Field(min_length=2, max_length=2)
    rashis: RashisVM
    samvats: SamvatsVM
    months: MonthsVM
    ritu_ayana: RituAyanaVM
    day_night: Optional[DayNightVM] = None
    auspicious_times: AuspiciousTimesVM
    inauspicious_times: InauspiciousTimesVM
    special_yogas: SpecialYogasVM
    panchaka: List[PanchakaSegmentVM] = Field(default_factory=list)
    festivals: List[FestivalVM] = Field(default_factory=list)
    recommendations: RecommendationsVM
    summary: SummaryVM
    calculated_at: datetime
