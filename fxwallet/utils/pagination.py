MAX_PAGE_SIZE = 100


def paginate_query(query, page, limit):
    page = max(int(page) if page else 1, 1)
    limit = min(max(int(limit) if limit else 20, 1), MAX_PAGE_SIZE)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all() if total else []
    total_pages = (total + limit - 1) // limit
    return items, {"total": total, "page": page, "limit": limit, "total_pages": total_pages}
