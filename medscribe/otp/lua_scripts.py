# Compare-and-delete for a stored OTP record (hash with otp / expires / attempts).
# ARGV[1] = supplied code, ARGV[2] = now in epoch ms
# Returns 0 = not found, 1 = verified (deleted), 2 = expired (deleted), 3 = wrong code (kept)
LUA_CONSUME_OTP = """
local rec = redis.call("HMGET", KEYS[1], "otp", "expires")
if not rec[1] then
  return 0
end
if tonumber(ARGV[2]) > tonumber(rec[2]) then
  redis.call("DEL", KEYS[1])
  return 2
end
if rec[1] ~= ARGV[1] then
  return 3
end
redis.call("DEL", KEYS[1])
return 1
"""
