from fastapi import Header, HTTPException

MAX_USER_ID_LENGTH = 320


async def require_user_id(x_user_id: str = Header(...)):
    # The identifier is opaque: no sign-in happens here, callers vouch for it.
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(status_code=400, detail="X-User-Id must not be blank")
    if len(user_id) > MAX_USER_ID_LENGTH:
        raise HTTPException(status_code=400, detail="X-User-Id is too long")
    return user_id
