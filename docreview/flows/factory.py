from docreview.analysis.client import AnalysisClient
from docreview.analysis.factory import AnalysisClientFactory
from docreview.config.settings import Settings
from docreview.documents.encoder import DocumentEncoder
from docreview.documents.models import DocumentClass
from docreview.flows.features import FEATURES
from docreview.flows.flow import DocumentAnalysisFlow
from docreview.normalization.factory import NormalizerFactory
from docreview.prompts.catalog import PromptCatalog


class FlowFactory:
    """Builds one independent flow per document class around a shared client."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        client: AnalysisClient | None = None,
        catalog: PromptCatalog | None = None,
    ) -> dict[DocumentClass, DocumentAnalysisFlow]:
        if catalog is None:
            catalog = PromptCatalog()
        if client is None:
            client = AnalysisClientFactory.create(settings, catalog=catalog)
        encoder = DocumentEncoder()
        return {
            document_class: DocumentAnalysisFlow(
                feature=feature,
                prompt=catalog.get(document_class),
                client=client,
                normalizer=NormalizerFactory.create(document_class),
                encoder=encoder,
            )
            for document_class, feature in FEATURES.items()
        }
