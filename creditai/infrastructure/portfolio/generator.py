"""
Mock portfolio datasets for the CreditAI dashboard.

Static tables (KPIs, model metrics, confusion matrices, fairness, costs)
are fixed. Distributions, borrowers, ROC curves and the threshold sweep
are generated from a seeded RNG so the portfolio is reproducible for a
given seed and stable for the lifetime of the process.
"""

import math
import random
from functools import lru_cache
from typing import Dict, List

from creditai.core.config import settings
from creditai.domain.entities import (
    Borrower,
    BorrowerRecommendation,
    BorrowerRiskBand,
    ConfusionMatrix,
    CostSimulation,
    FairnessSubgroup,
    FeatureAttribution,
    FeatureImportance,
    KpiSummary,
    ModelMetrics,
    Portfolio,
    PredictionBin,
    RiskBucket,
    RocPoint,
    ThresholdPoint,
)
from creditai.service.scoring.features import round_half_up


NUM_BORROWERS = 50
FIRST_BORROWER_NUMBER = 1001

FIRST_NAMES = [
    "Aarav", "Priya", "Rahul", "Sneha", "Vikram", "Ananya", "Rohan", "Kavita", "Arjun", "Meera",
    "Sanjay", "Divya", "Amit", "Pooja", "Karan", "Neha", "Raj", "Swati", "Deepak", "Ritu",
]
LAST_NAMES = [
    "Sharma", "Patel", "Singh", "Kumar", "Gupta", "Reddy", "Joshi", "Mehta", "Nair", "Verma",
    "Iyer", "Chopra", "Das", "Bhat", "Rao", "Desai", "Mishra", "Pandey", "Shah", "Agarwal",
]

KPIS = KpiSummary(
    total_borrowers=15847,
    avg_credit_score=682,
    approval_rate=0.734,
    auc_score=0.867,
    selected_model="XGBoost",
    financial_inclusion_rate=0.23,
    new_borrowers_scored=3241,
)

RISK_DISTRIBUTION = [
    RiskBucket(band="Low Risk", count=7234, percentage=45.6),
    RiskBucket(band="Medium Risk", count=5128, percentage=32.4),
    RiskBucket(band="High Risk", count=3485, percentage=22.0),
]

MODEL_METRICS = [
    ModelMetrics("Logistic Regression", 0.792, 0.756, 0.681, 0.717, 0.812, 0.788, 0.015),
    ModelMetrics("Random Forest", 0.841, 0.823, 0.748, 0.784, 0.856, 0.835, 0.012),
    ModelMetrics("XGBoost", 0.862, 0.847, 0.789, 0.817, 0.891, 0.857, 0.009),
    ModelMetrics("KNN", 0.743, 0.712, 0.634, 0.671, 0.768, 0.738, 0.022),
]

CONFUSION_MATRICES = {
    "Logistic Regression": ConfusionMatrix(1362, 438, 4538, 638),
    "Random Forest": ConfusionMatrix(1496, 322, 4654, 504),
    "XGBoost": ConfusionMatrix(1578, 284, 4692, 422),
    "KNN": ConfusionMatrix(1268, 514, 4462, 732),
}

FAIRNESS = [
    FairnessSubgroup(subgroup="Urban", accuracy=0.87, approval_rate=0.78, count=8234),
    FairnessSubgroup(subgroup="Semi-Urban", accuracy=0.84, approval_rate=0.72, count=4512),
    FairnessSubgroup(subgroup="Rural", accuracy=0.81, approval_rate=0.65, count=3101),
]

DISPARATE_IMPACT_RATIO = 0.833

COST_SIMULATION = CostSimulation(
    avg_loan_amount=250000,
    false_negative_cost=18500,   # missed good borrower
    false_positive_cost=62000,   # default loss on a bad loan
    true_positive_gain=12500,    # revenue from a good loan
    total_false_negatives=422,
    total_false_positives=284,
    total_true_positives=1578,
)

GLOBAL_IMPORTANCE = [
    FeatureImportance("Debt-to-Income Ratio", 0.284),
    FeatureImportance("Payment Utilization", 0.213),
    FeatureImportance("Late Payments", 0.176),
    FeatureImportance("Credit Age", 0.112),
    FeatureImportance("Monthly Income", 0.089),
    FeatureImportance("Total Debt", 0.067),
    FeatureImportance("Open Accounts", 0.041),
    FeatureImportance("Revolving Balance", 0.018),
]


def generate_prediction_distribution(rng: random.Random) -> List[PredictionBin]:
    """Bimodal histogram of default probabilities in twenty 5% bins."""
    bins = []
    for i in range(20):
        start = i * 0.05
        label = f"{round(start * 100)}-{round((start + 0.05) * 100)}%"
        peak_good = math.exp(-((start - 0.2) ** 2) / 0.02) * 800
        peak_bad = math.exp(-((start - 0.8) ** 2) / 0.03) * 1200
        count = int(round_half_up(peak_good + peak_bad + rng.random() * 50))
        bins.append(PredictionBin(bin=label, count=count))
    return bins


def generate_attributions(
    rng: random.Random,
    risk_band: BorrowerRiskBand,
) -> List[FeatureAttribution]:
    """Per-borrower attributions whose sign follows the risk band, ranked by |value|."""
    if risk_band == BorrowerRiskBand.HIGH:
        multiplier = 1.0
    elif risk_band == BorrowerRiskBand.MEDIUM:
        multiplier = 0.3
    else:
        multiplier = -1.0

    raw = [
        ("Debt-to-Income Ratio", multiplier * (0.15 + rng.random() * 0.2)),
        ("Payment Utilization", multiplier * (0.1 + rng.random() * 0.15)),
        ("Late Payments", multiplier * (0.08 + rng.random() * 0.12)),
        ("Credit Age", -multiplier * (0.05 + rng.random() * 0.1)),
        ("Monthly Income", -multiplier * (0.04 + rng.random() * 0.08)),
        ("Open Accounts", (rng.random() - 0.5) * 0.06),
        ("Total Debt", multiplier * (0.03 + rng.random() * 0.05)),
    ]
    attributions = [
        FeatureAttribution(feature=name, value=round_half_up(value, 3))
        for name, value in raw
    ]
    return sorted(attributions, key=lambda a: abs(a.value), reverse=True)


def generate_borrower(rng: random.Random, index: int) -> Borrower:
    """Generate the index-th borrower of the portfolio."""
    credit_score = int(round_half_up(350 + rng.random() * 500))

    if credit_score >= 700:
        risk_band = BorrowerRiskBand.LOW
        probability = 0.1 + rng.random() * 0.25
        late_payments = int(round_half_up(rng.random() * 2))
    elif credit_score >= 550:
        risk_band = BorrowerRiskBand.MEDIUM
        probability = 0.35 + rng.random() * 0.3
        late_payments = int(round_half_up(1 + rng.random() * 5))
    else:
        risk_band = BorrowerRiskBand.HIGH
        probability = 0.65 + rng.random() * 0.3
        late_payments = int(round_half_up(3 + rng.random() * 10))

    return Borrower(
        id=f"BRW-{FIRST_BORROWER_NUMBER + index:04d}",
        name=f"{FIRST_NAMES[index % 20]} {LAST_NAMES[(index * 7) % 20]}",
        credit_score=credit_score,
        risk_band=risk_band,
        prediction_probability=round_half_up(probability, 3),
        debt_to_income_ratio=round_half_up(0.1 + rng.random() * 0.7, 2),
        payment_utilization_ratio=round_half_up(0.05 + rng.random() * 0.9, 2),
        monthly_income=int(round_half_up(15000 + rng.random() * 185000)),
        number_of_open_accounts=int(round_half_up(1 + rng.random() * 12)),
        number_of_late_payments=late_payments,
        total_debt=int(round_half_up(10000 + rng.random() * 2000000)),
        credit_age=round_half_up(1 + rng.random() * 20, 1),
        recommendation=(
            BorrowerRecommendation.APPROVE
            if credit_score >= 550
            else BorrowerRecommendation.DECLINE
        ),
        confidence=round_half_up(0.6 + rng.random() * 0.35, 2),
        attributions=generate_attributions(rng, risk_band),
    )


def generate_roc_curve(rng: random.Random, auc: float) -> List[RocPoint]:
    """ROC curve from (0, 0) to (1, 1) whose bow grows with the model's AUC."""
    points = [RocPoint(fpr=0.0, tpr=0.0)]
    for i in range(1, 20):
        fpr = i / 20
        tpr = min(1.0, fpr ** (1 / (auc * 2.5)) + (rng.random() - 0.5) * 0.03)
        points.append(RocPoint(fpr=round_half_up(fpr, 3), tpr=round_half_up(tpr, 3)))
    points.append(RocPoint(fpr=1.0, tpr=1.0))
    return points


def generate_threshold_sweep(rng: random.Random) -> List[ThresholdPoint]:
    """Precision rises and recall falls as the decision threshold goes up."""
    sweep = []
    for i in range(21):
        threshold = i * 0.05
        precision = round_half_up(0.55 + 0.4 * threshold + (rng.random() - 0.5) * 0.03, 3)
        recall = round_half_up(0.95 - 0.6 * threshold + (rng.random() - 0.5) * 0.03, 3)
        f1 = round_half_up((2 * precision * recall) / (precision + recall), 3)
        sweep.append(
            ThresholdPoint(
                threshold=round_half_up(threshold, 2),
                precision=precision,
                recall=recall,
                f1=f1,
            )
        )
    return sweep


def build_portfolio(seed: int) -> Portfolio:
    """
    Build every portfolio dataset from one seed.

    Args:
        seed: RNG seed; the same seed always yields the same portfolio

    Returns:
        A fully populated Portfolio
    """
    rng = random.Random(seed)

    prediction_distribution = generate_prediction_distribution(rng)
    borrowers = [generate_borrower(rng, i) for i in range(NUM_BORROWERS)]
    roc_curves: Dict[str, List[RocPoint]] = {
        m.model: generate_roc_curve(rng, m.auc) for m in MODEL_METRICS
    }
    threshold_sweep = generate_threshold_sweep(rng)

    return Portfolio(
        kpis=KPIS,
        risk_distribution=list(RISK_DISTRIBUTION),
        prediction_distribution=prediction_distribution,
        borrowers=borrowers,
        model_metrics=list(MODEL_METRICS),
        roc_curves=roc_curves,
        confusion_matrices=dict(CONFUSION_MATRICES),
        threshold_sweep=threshold_sweep,
        fairness=list(FAIRNESS),
        disparate_impact_ratio=DISPARATE_IMPACT_RATIO,
        cost_simulation=COST_SIMULATION,
        global_importance=list(GLOBAL_IMPORTANCE),
    )


@lru_cache
def get_portfolio() -> Portfolio:
    """Get the cached portfolio for the configured seed."""
    return build_portfolio(settings.portfolio_seed)
