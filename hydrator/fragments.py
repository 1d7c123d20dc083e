"""Static fragment table: which content file feeds which page element."""

# Order matters: fragments are fetched in this order on every pass.
FRAGMENT_TARGETS: dict[str, str] = {
    "ask-problem-definition.txt": "problem-definition-content",
    "ask-stakeholder-analysis.txt": "stakeholder-analysis-content",
    "ask-success-criteria.txt": "success-criteria-content",
    "evidence-scientific-methods.txt": "scientific-methods-content",
    "evidence-scientific-sources.txt": "scientific-sources-content",
    "evidence-scientific-appraisal.txt": "scientific-appraisal-content",
    "evidence-practitioner-methods.txt": "practitioner-methods-content",
    "evidence-practitioner-sources.txt": "practitioner-sources-content",
    "evidence-practitioner-appraisal.txt": "practitioner-appraisal-content",
    "evidence-organizational-methods.txt": "organizational-methods-content",
    "evidence-organizational-sources.txt": "organizational-sources-content",
    "evidence-organizational-appraisal.txt": "organizational-appraisal-content",
    "evidence-stakeholder-methods.txt": "stakeholder-methods-content",
    "evidence-stakeholder-sources.txt": "stakeholder-sources-content",
    "evidence-stakeholder-appraisal.txt": "stakeholder-appraisal-content",
    "synthesis-integration.txt": "evidence-synthesis-content",
    "application-implementation.txt": "implementation-content",
    "assessment-monitoring.txt": "assessment-content",
}

FRAGMENT_IDS: tuple[str, ...] = tuple(FRAGMENT_TARGETS)
