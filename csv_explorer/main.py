import logging
from typing import Optional
from urllib.parse import quote

from fastapi import Body, Depends, FastAPI, File, HTTPException, Response, UploadFile

from .coltypes import detect_column_types
from .config import get_settings
from .encoding import decode_upload, is_supported_file
from .export import export_filename, serialize
from .models import DatasetSummary, HealthResponse, ViewResponse
from .parser import parse_text
from .rules import EXPORT_MEDIA_TYPE
from .store import Dataset, DatasetStore
from .table import build_table, cell
from .view import ViewAction, derive_view, initial_view, reduce_view

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="CSV ingestion with type inference, filtering, sorting, paging and export",
    version=settings.VERSION,
)

store = DatasetStore(max_datasets=settings.MAX_DATASETS)


def get_store() -> DatasetStore:
    return store


def _get_dataset(dataset_id: str, datasets: DatasetStore) -> Dataset:
    dataset = datasets.get(dataset_id)
    if dataset is None:
        raise HTTPException(status_code=404, detail="Dataset not found")
    return dataset


def _summary(dataset: Dataset) -> DatasetSummary:
    return DatasetSummary(
        id=dataset.id,
        filename=dataset.filename,
        delimiter=dataset.delimiter,
        encoding=dataset.encoding,
        headers=dataset.table.headers,
        column_types=dataset.col_types,
        rows=len(dataset.table.data),
        view=dataset.view,
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/datasets", response_model=DatasetSummary, status_code=201)
async def load_dataset(
    file: UploadFile = File(...),
    datasets: DatasetStore = Depends(get_store),
):
    if not is_supported_file(file.filename, file.content_type):
        logger.warning("Rejected upload %s (%s)", file.filename, file.content_type)
        raise HTTPException(
            status_code=422,
            detail="Only CSV, TSV or plain-text files are supported",
        )

    raw = await file.read()
    if len(raw) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum: {settings.MAX_UPLOAD_SIZE / (1024 * 1024):.0f}MB",
        )

    text, encoding = decode_upload(raw)
    parsed = parse_text(text)
    table = build_table(parsed.rows)

    if not table.headers:
        raise HTTPException(
            status_code=422,
            detail="The file appears to be empty or has no recognisable columns.",
        )

    dataset = datasets.add(
        Dataset(
            filename=file.filename or "",
            delimiter=parsed.delimiter,
            table=table,
            col_types=detect_column_types(table.headers, table.data),
            view=initial_view(table.column_count, settings.DEFAULT_PAGE_SIZE),
            encoding=encoding,
        )
    )
    logger.info(
        "Loaded %s as dataset %s: %d columns, %d rows, delimiter %r",
        dataset.filename, dataset.id, table.column_count, len(table.data), parsed.delimiter,
    )
    return _summary(dataset)


@app.get("/datasets/{dataset_id}", response_model=DatasetSummary)
def get_dataset(dataset_id: str, datasets: DatasetStore = Depends(get_store)):
    return _summary(_get_dataset(dataset_id, datasets))


@app.post("/datasets/{dataset_id}/view", response_model=ViewResponse)
def view_dataset(
    dataset_id: str,
    action: Optional[ViewAction] = Body(default=None),
    datasets: DatasetStore = Depends(get_store),
):
    dataset = _get_dataset(dataset_id, datasets)
    if action is not None:
        dataset.view = reduce_view(dataset.view, action, dataset.table.column_count)

    derived = derive_view(dataset.table, dataset.col_types, dataset.view)
    if derived.page != dataset.view.page:
        dataset.view = dataset.view.model_copy(update={"page": derived.page})
    width = dataset.table.column_count
    return ViewResponse(
        view=dataset.view,
        rows=[[cell(row, c) for c in range(width)] for row in derived.page_rows],
        page=derived.page,
        total_pages=derived.total_pages,
        page_list=derived.page_list,
        matched=derived.matched,
        total=derived.total,
        row_info=derived.row_info,
    )


@app.get("/datasets/{dataset_id}/export")
def export_dataset(dataset_id: str, datasets: DatasetStore = Depends(get_store)):
    dataset = _get_dataset(dataset_id, datasets)
    derived = derive_view(dataset.table, dataset.col_types, dataset.view)

    name = export_filename(dataset.filename)
    logger.info("Exporting %d of %d rows from dataset %s", derived.matched, derived.total, dataset.id)
    return Response(
        content=serialize(dataset.table.headers, derived.rows).encode("utf-8"),
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(name)}"},
    )


@app.delete("/datasets/{dataset_id}", status_code=204)
def delete_dataset(dataset_id: str, datasets: DatasetStore = Depends(get_store)):
    if not datasets.remove(dataset_id):
        raise HTTPException(status_code=404, detail="Dataset not found")
    return Response(status_code=204)
