"""Labeled spoilage examples based on FDA handling guidelines."""

from spoilage_guard.domain.models import SpoilageStatus, TrainingSample

SAFE = SpoilageStatus.SAFE
CAUTION = SpoilageStatus.CAUTION
REJECT = SpoilageStatus.REJECT

DATASET: tuple[TrainingSample, ...] = (
    # Cooked food
    TrainingSample(is_cooked=1, hours=0.5, temp=25, label=SAFE, risk_score=5),
    TrainingSample(is_cooked=1, hours=1.0, temp=25, label=SAFE, risk_score=15),
    TrainingSample(is_cooked=1, hours=2.5, temp=20, label=SAFE, risk_score=25),
    TrainingSample(is_cooked=1, hours=3.0, temp=25, label=CAUTION, risk_score=45),
    TrainingSample(is_cooked=1, hours=4.5, temp=25, label=REJECT, risk_score=85),
    TrainingSample(is_cooked=1, hours=6.0, temp=22, label=REJECT, risk_score=95),
    TrainingSample(is_cooked=1, hours=2.0, temp=35, label=CAUTION, risk_score=60),
    TrainingSample(is_cooked=1, hours=4.0, temp=35, label=REJECT, risk_score=90),
    TrainingSample(is_cooked=1, hours=10.0, temp=4, label=SAFE, risk_score=10),
    TrainingSample(is_cooked=1, hours=24.0, temp=4, label=SAFE, risk_score=20),
    TrainingSample(is_cooked=1, hours=48.0, temp=4, label=CAUTION, risk_score=55),
    # Raw food
    TrainingSample(is_cooked=0, hours=1.0, temp=20, label=SAFE, risk_score=10),
    TrainingSample(is_cooked=0, hours=3.0, temp=20, label=CAUTION, risk_score=40),
    TrainingSample(is_cooked=0, hours=5.0, temp=20, label=REJECT, risk_score=75),
    TrainingSample(is_cooked=0, hours=1.0, temp=30, label=CAUTION, risk_score=45),
    TrainingSample(is_cooked=0, hours=3.0, temp=30, label=REJECT, risk_score=85),
    TrainingSample(is_cooked=0, hours=12.0, temp=5, label=SAFE, risk_score=15),
    # Frozen
    TrainingSample(is_cooked=1, hours=100.0, temp=-5, label=SAFE, risk_score=0),
    TrainingSample(is_cooked=0, hours=100.0, temp=-5, label=SAFE, risk_score=0),
)
