"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalysisClientFactory.
"""

import json
from collections.abc import Mapping
from typing import ClassVar

from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.models import AnalysisRequest
from docreview.documents.models import DocumentClass
from docreview.prompts.catalog import PromptCatalog


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that answers each catalog prompt with a fixed response.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    CREDIT_REPORT_RESPONSE: ClassVar[dict[str, object]] = {
        "personalInfo": {
            "name": "Jane Example",
            "ssn": "XXX-XX-1234",
            "dateOfBirth": "01/15/1985",
            "currentAddress": "12 Sample Street, Springfield, IL 62701",
            "previousAddresses": ["40 Old Road, Springfield, IL 62702"],
            "employmentInfo": "Example Corp",
        },
        "creditSummary": {
            "creditScore": "742",
            "scoreDate": "03/01/2025",
            "totalAccounts": "4",
            "openAccounts": "3",
            "closedAccounts": "1",
            "derogatoryMarks": "0",
            "totalInquiries": "1",
            "oldestAccount": "12 years",
            "averageAccountAge": "6 years",
            "totalCreditLimit": "$25,000",
            "totalBalance": "$3,250",
            "creditUtilization": "13%",
        },
        "creditAccounts": [
            {
                "creditorName": "Sample Bank",
                "accountType": "Revolving",
                "accountNumber": "4321",
                "status": "Open",
                "balance": "$1,250",
                "creditLimit": "$10,000",
                "monthlyPayment": "$35",
                "openedDate": "04/2013",
                "lastReported": "02/2025",
                "paymentHistory": "Current",
            },
        ],
        "paymentHistory": {
            "onTimePayments": "100%",
            "latePayments30Days": "0",
            "latePayments60Days": "0",
            "latePayments90Days": "0",
            "totalMissedPayments": "0",
        },
        "creditInquiries": [
            {"creditor": "Auto Lender", "date": "11/20/2024", "type": "Hard"},
        ],
        "publicRecords": [],
        "collections": [],
        "validationIssues": [],
    }

    APPRAISAL_RESPONSE: ClassVar[dict[str, object]] = {
        "propertyDetails": {
            "address": "12 Sample Street, Springfield, IL 62701",
            "propertyType": "Single Family",
            "squareFootage": "1,850 sq ft",
            "lotSize": "0.25 acres",
            "yearBuilt": "1998",
            "bedrooms": "3",
            "bathrooms": "2",
            "garageSpaces": "2",
        },
        "valuation": {
            "appraisedValue": "$325,000",
            "appraisalDate": "02/10/2025",
            "effectiveDate": "02/08/2025",
            "purchasePrice": "$320,000",
            "pricePerSqFt": "$176",
            "marketTrend": "Stable",
            "daysOnMarket": "21 days",
        },
        "comparables": [],
        "conditionAssessment": {
            "overallCondition": "Good",
            "exteriorCondition": "Well maintained",
            "interiorCondition": "Updated kitchen",
            "roofCondition": "Replaced 2019",
            "foundationCondition": "No visible defects",
            "repairsNeeded": [],
            "estimatedRepairCost": "$0",
        },
        "riskAssessment": {"overallRisk": "Low", "riskFactors": []},
        "marketAnalysis": {
            "marketConditions": "Moderate",
            "supplyDemand": "In balance",
            "medianSalePrice": "$310,000",
            "averageDaysOnMarket": "30 days",
            "priceAppreciation": "3.1% annually",
            "inventory": "4 months",
        },
        "recommendations": ["Proceed with standard underwriting"],
    }

    TITLE_RESPONSE: ClassVar[str] = (
        "1. Property Identification: 12 Sample Street, Lot 4, Block 2.\n"
        "2. Ownership: Jane Example, fee simple.\n"
        "9. Risk Assessment: LOW\n"
        "10. Recommendations: No red flags found; proceed to closing."
    )

    def __init__(
        self,
        responses: Mapping[str, str] | None = None,
        default_response: str = "",
    ) -> None:
        self._responses = dict(responses) if responses is not None else {}
        self._default_response = default_response

    @classmethod
    def from_catalog(cls, catalog: PromptCatalog) -> "ExampleClientAdapter":
        """Build an adapter that answers every catalog prompt."""
        return cls(
            responses={
                catalog.get(DocumentClass.CREDIT_REPORT): json.dumps(
                    cls.CREDIT_REPORT_RESPONSE, indent=2
                ),
                catalog.get(DocumentClass.APPRAISAL): json.dumps(
                    cls.APPRAISAL_RESPONSE, indent=2
                ),
                catalog.get(DocumentClass.TITLE): cls.TITLE_RESPONSE,
            }
        )

    def generate_content(self, *, model: str, request: AnalysisRequest) -> str:
        _ = model
        return self._responses.get(request.prompt, self._default_response)
