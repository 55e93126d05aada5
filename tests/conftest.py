import copy
import io
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

CREDIT_REPORT_DATA: dict[str, Any] = {
    "personalInfo": {
        "name": "John Sample",
        "ssn": "XXX-XX-6789",
        "dateOfBirth": "07/04/1980",
        "currentAddress": "1 Main St, Columbus, OH 43004",
        "previousAddresses": ["9 Elm St, Dayton, OH 45402"],
        "employmentInfo": "Acme Logistics",
    },
    "creditSummary": {
        "creditScore": "688",
        "scoreDate": "01/05/2025",
        "totalAccounts": "5",
        "openAccounts": "4",
        "closedAccounts": "1",
        "derogatoryMarks": "1",
        "totalInquiries": "2",
        "oldestAccount": "15 years",
        "averageAccountAge": "7 years",
        "totalCreditLimit": "$18,000",
        "totalBalance": "$6,400",
        "creditUtilization": "36%",
    },
    "creditAccounts": [
        {
            "creditorName": "First Card",
            "accountType": "Revolving",
            "accountNumber": "1111",
            "status": "Open",
            "balance": "$2,400",
            "creditLimit": "$8,000",
            "monthlyPayment": "$75",
            "openedDate": "06/2012",
            "lastReported": "12/2024",
            "paymentHistory": "Current",
        },
        {
            "creditorName": "Auto Finance",
            "accountType": "Installment",
            "accountNumber": "2222",
            "status": "Closed",
            "balance": "$0",
            "creditLimit": "Not available",
            "monthlyPayment": "$0",
            "openedDate": "03/2018",
            "lastReported": "03/2023",
            "paymentHistory": "30 days late",
        },
    ],
    "paymentHistory": {
        "onTimePayments": "96%",
        "latePayments30Days": "2",
        "latePayments60Days": "0",
        "latePayments90Days": "0",
        "totalMissedPayments": "2",
    },
    "creditInquiries": [
        {"creditor": "Mortgage Co", "date": "12/01/2024", "type": "Hard"},
        {"creditor": "Card Offer", "date": "10/10/2024", "type": "Soft"},
    ],
    "publicRecords": [
        {
            "type": "Tax Lien",
            "date": "05/05/2019",
            "amount": "$3,100",
            "status": "Satisfied",
            "courtInfo": "Not available",
        }
    ],
    "collections": [
        {
            "creditor": "City Hospital",
            "collectionAgency": "Recovery LLC",
            "amount": "$450",
            "date": "08/15/2021",
            "status": "Paid",
        }
    ],
    "validationIssues": [
        {
            "section": "Collections",
            "issue": "Paid collection still reported",
            "severity": "Medium",
            "recommendation": "Request update from the bureau",
        }
    ],
}

APPRAISAL_REPORT_DATA: dict[str, Any] = {
    "propertyDetails": {
        "address": "77 Lake Rd, Madison, WI 53703",
        "propertyType": "Single Family",
        "squareFootage": "2,100 sq ft",
        "lotSize": "0.3 acres",
        "yearBuilt": "2004",
        "bedrooms": "4",
        "bathrooms": "2.5",
        "garageSpaces": "2",
    },
    "valuation": {
        "appraisedValue": "$410,000",
        "appraisalDate": "01/20/2025",
        "effectiveDate": "01/18/2025",
        "purchasePrice": "$405,000",
        "pricePerSqFt": "$195",
        "marketTrend": "Increasing",
        "daysOnMarket": "12 days",
    },
    "comparables": [
        {
            "address": "81 Lake Rd",
            "salePrice": "$398,000",
            "saleDate": "11/02/2024",
            "squareFootage": "2,050 sq ft",
            "bedrooms": "4",
            "bathrooms": "2",
            "pricePerSqFt": "$194",
            "proximity": "0.1 miles",
            "adjustments": "$5,000",
        }
    ],
    "conditionAssessment": {
        "overallCondition": "Average",
        "exteriorCondition": "Siding weathered",
        "interiorCondition": "Original finishes",
        "roofCondition": "15 years old",
        "foundationCondition": "Minor settling cracks",
        "repairsNeeded": ["Replace gutters", "Seal foundation cracks"],
        "estimatedRepairCost": "$4,500",
    },
    "riskAssessment": {
        "overallRisk": "Medium",
        "riskFactors": [
            {
                "factor": "Deferred maintenance",
                "severity": "Medium",
                "description": "Several items need repair before closing",
            }
        ],
    },
    "marketAnalysis": {
        "marketConditions": "Strong",
        "supplyDemand": "Demand exceeds supply",
        "medianSalePrice": "$385,000",
        "averageDaysOnMarket": "18 days",
        "priceAppreciation": "5.2% annually",
        "inventory": "2 months",
    },
    "recommendations": [
        "Obtain a roof inspection",
        "Escrow repair costs",
    ],
}


@pytest.fixture()
def credit_report_data() -> dict[str, Any]:
    """Schema-complete credit report as the model would return it."""
    return copy.deepcopy(CREDIT_REPORT_DATA)


@pytest.fixture()
def appraisal_report_data() -> dict[str, Any]:
    """Schema-complete appraisal report as the model would return it."""
    return copy.deepcopy(APPRAISAL_REPORT_DATA)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "TRI-MERGE CREDIT REPORT")
    c.save()
    return buf.getvalue()
