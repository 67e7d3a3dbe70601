"""Name Registry - DynamoDB backed name list web application"""
