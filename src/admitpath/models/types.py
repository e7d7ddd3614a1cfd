from enum import Enum

class GpaBand(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

class TimeWindow(str, Enum):
    EARLY = "early"
    LATE = "late"
    FINAL = "final"
    CLOSED = "closed"

class TemplateKey(str, Enum):
    CLOSED_WINDOW = "closed_window"
    CC_TO_UC = "cc_to_uc"
    CC_TRANSFER_REFUSED = "cc_transfer_refused"
    ACCESS_UC = "access_uc"
    FLOOR_GUARDED_UC = "floor_guarded_uc"
    MID_UC_EARLY = "mid_uc_early"
    MID_UC_LATE = "mid_uc_late"
    CSU = "csu"

class FeedbackRating(str, Enum):
    MATCHED = "matched"
    PARTIAL = "partial"
    NOT_ACCURATE = "not_accurate"
