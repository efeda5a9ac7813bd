import math
from typing import Any, Dict, List, Tuple

from sqlalchemy.orm import Query


def paginate(query: Query, page: int, limit: int) -> Tuple[List[Any], int]:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def list_payload(items: List[Any], total: int, page: int, limit: int) -> Dict[str, Any]:
    return {
        "success": True,
        "count": len(items),
        "total": total,
        "pagination": {
            "page": page,
            "limit": limit,
            "pages": math.ceil(total / limit) if limit else 0
        },
        "data": items
    }
